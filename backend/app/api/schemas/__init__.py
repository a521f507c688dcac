"""API schema package."""

from app.api.schemas.associations import GroupWithUsers, TaskWithUser, UserWithGroups, UserWithTasks
from app.api.schemas.common import MessageResponse
from app.api.schemas.groups import GroupCreate, GroupRead, GroupUpdate
from app.api.schemas.tasks import TaskCreate, TaskRead
from app.api.schemas.users import UserCreate, UserRead, UserUpdate

__all__ = [
    "MessageResponse",
    "UserCreate",
    "UserUpdate",
    "UserRead",
    "GroupCreate",
    "GroupUpdate",
    "GroupRead",
    "TaskCreate",
    "TaskRead",
    "UserWithGroups",
    "UserWithTasks",
    "GroupWithUsers",
    "TaskWithUser",
]
