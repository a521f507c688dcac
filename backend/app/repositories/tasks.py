"""Task repository — data-access operations for the tasks table."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.task import Task
from app.repositories import base


async def list_tasks(db: AsyncSession) -> list[Task]:
    """List all tasks ordered by id."""
    return await base.list_all(db, Task)


async def create_task(db: AsyncSession, *, name: str, deadline: datetime) -> Task:
    """Create a new, unassigned task."""
    return await base.create(db, Task, name=name, deadline=deadline)


async def get_task_with_user(db: AsyncSession, task_id: int) -> Task | None:
    """Fetch a task joined with its owning user (if any)."""
    return await base.get_with_association(db, Task, task_id, Task.user)


async def assign_to_user(db: AsyncSession, task_id: int, user_id: int) -> int:
    """Set the task's owner. Returns the affected row count."""
    return await base.update_by_id(db, Task, task_id, user_id=user_id)


async def delete_task(db: AsyncSession, task_id: int) -> int:
    """Hard-delete a task. Returns the affected row count."""
    return await base.delete_by_id(db, Task, task_id)
