"""Task endpoints, including assignment of a task to its owning user."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.errors import translate_store_errors
from app.api.schemas import MessageResponse, TaskCreate, TaskRead, TaskWithUser
from app.core.constants import Message
from app.core.errors import NotFoundError
from app.repositories import tasks as task_repository
from app.repositories import users as user_repository

router = APIRouter(prefix="/task", tags=["Tasks"])


@router.get("", response_model=list[TaskRead])
async def list_tasks(db: AsyncSession = Depends(get_db)) -> list[TaskRead]:
    """List all tasks ordered by id."""
    with translate_store_errors("Error fetching all tasks"):
        tasks = await task_repository.list_tasks(db)
    return [TaskRead.model_validate(task) for task in tasks]


@router.post("", response_model=TaskRead)
async def create_task(payload: TaskCreate, db: AsyncSession = Depends(get_db)) -> TaskRead:
    """Create an unassigned task and return the stored record."""
    with translate_store_errors("Error creating task"):
        task = await task_repository.create_task(db, **payload.model_dump())
    return TaskRead.model_validate(task)


@router.get("/{task_id}", response_model=TaskWithUser, response_model_exclude_unset=True)
async def get_task(task_id: int, db: AsyncSession = Depends(get_db)) -> TaskWithUser:
    """Return a task, embedding its owner as `user` when one is assigned."""
    with translate_store_errors("Error fetching task"):
        task = await task_repository.get_task_with_user(db, task_id)
    if task is None:
        raise NotFoundError(Message.TASK_NOT_FOUND)
    return TaskWithUser.from_task(task)


@router.put("/{task_id}/user/{user_id}", response_model=MessageResponse)
async def assign_task(
    task_id: int,
    user_id: int,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Make `user_id` the owner of the task. The user must exist."""
    with translate_store_errors("Error creating task for user"):
        user = await user_repository.get_user_by_id(db, user_id)
        if user is None:
            raise NotFoundError(Message.USER_NOT_FOUND)
        affected = await task_repository.assign_to_user(db, task_id, user_id)
    if not affected:
        raise NotFoundError(Message.TASK_NOT_FOUND)
    return MessageResponse(message=Message.TASK_ASSIGNED)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(task_id: int, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    with translate_store_errors("Error deleting task"):
        deleted = await task_repository.delete_task(db, task_id)
    if not deleted:
        raise NotFoundError(Message.TASK_NOT_FOUND)
    return MessageResponse(message=Message.TASK_DELETED)
