"""
Schemas for entities serialized together with one association.

Only mapped entity columns appear here; the user_groups junction has no
schema, so its columns can never leak into a response.
"""

from __future__ import annotations

from app.api.schemas.groups import GroupRead
from app.api.schemas.tasks import TaskRead
from app.api.schemas.users import UserRead


class UserWithGroups(UserRead):
    groups: list[GroupRead]


class UserWithTasks(UserRead):
    tasks: list[TaskRead]


class GroupWithUsers(GroupRead):
    users: list[UserRead]


class TaskWithUser(TaskRead):
    """Task detail. `user` is only present in the output when an owner is set."""

    user: UserRead | None = None

    @classmethod
    def from_task(cls, task) -> TaskWithUser:
        data = TaskRead.model_validate(task).model_dump()
        if task.user is not None:
            data["user"] = UserRead.model_validate(task.user)
        return cls(**data)
