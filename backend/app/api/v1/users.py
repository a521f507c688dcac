"""User CRUD endpoints, association views, and group membership."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.errors import translate_store_errors
from app.api.schemas import (
    MessageResponse,
    UserCreate,
    UserRead,
    UserUpdate,
    UserWithGroups,
    UserWithTasks,
)
from app.core.config import settings
from app.core.constants import Message
from app.core.errors import NotFoundError
from app.repositories import groups as group_repository
from app.repositories import users as user_repository

router = APIRouter(prefix="/user", tags=["Users"])


@router.get("", response_model=list[UserRead])
async def list_users(db: AsyncSession = Depends(get_db)) -> list[UserRead]:
    """List all users ordered by id."""
    with translate_store_errors("Error fetching all users"):
        users = await user_repository.list_users(db)
    return [UserRead.model_validate(user) for user in users]


@router.post("", response_model=UserRead)
async def create_user(payload: UserCreate, db: AsyncSession = Depends(get_db)) -> UserRead:
    """Create a user and return the stored record."""
    with translate_store_errors("Error creating user"):
        user = await user_repository.create_user(db, **payload.model_dump())
    return UserRead.model_validate(user)


@router.get("/{user_id}/group", response_model=UserWithGroups | list[UserWithGroups])
async def get_user_groups(
    user_id: int,
    db: AsyncSession = Depends(get_db),
) -> UserWithGroups | list[UserWithGroups]:
    """Return a user together with the groups they belong to."""
    with translate_store_errors("Error getting user by id"):
        user = await user_repository.get_user_with_groups(db, user_id)
    if user is None:
        raise NotFoundError(Message.USER_NOT_FOUND)

    body = UserWithGroups.model_validate(user)
    if settings.WRAP_ASSOCIATION_RESPONSES:
        return [body]
    return body


@router.get("/{user_id}/task", response_model=UserWithTasks)
async def get_user_tasks(user_id: int, db: AsyncSession = Depends(get_db)) -> UserWithTasks:
    """Return a user together with the tasks they own."""
    with translate_store_errors("Error fetching user"):
        user = await user_repository.get_user_with_tasks(db, user_id)
    if user is None:
        raise NotFoundError(Message.USER_NOT_FOUND)
    return UserWithTasks.model_validate(user)


@router.put("/{user_id}", response_model=MessageResponse)
async def update_user(
    user_id: int,
    payload: UserUpdate,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Update only the user fields present in the body."""
    with translate_store_errors("Error updating user by id"):
        affected = await user_repository.update_user(
            db, user_id, **payload.model_dump(exclude_unset=True)
        )
    if not affected:
        raise NotFoundError(Message.USER_NOT_FOUND)
    return MessageResponse(message=Message.USER_UPDATED)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    with translate_store_errors("Error deleting user"):
        deleted = await user_repository.delete_user(db, user_id)
    if not deleted:
        raise NotFoundError(Message.USER_NOT_FOUND)
    return MessageResponse(message=Message.USER_DELETED)


@router.put("/{user_id}/group/{group_id}", response_model=MessageResponse)
async def add_user_to_group(
    user_id: int,
    group_id: int,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Add a user to a group. Adding an existing member is a no-op."""
    with translate_store_errors("Error adding user to group"):
        user = await user_repository.get_user_by_id(db, user_id)
        group = await group_repository.get_group_by_id(db, group_id)
        if user is None or group is None:
            raise NotFoundError(Message.USER_OR_GROUP_NOT_FOUND)
        await user_repository.add_to_group(db, user, group)
    return MessageResponse(message=Message.USER_ADDED_TO_GROUP)
