"""Group CRUD endpoints and the group → users view."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.errors import translate_store_errors
from app.api.schemas import GroupCreate, GroupRead, GroupUpdate, GroupWithUsers, MessageResponse
from app.core.config import settings
from app.core.constants import Message
from app.core.errors import NotFoundError
from app.repositories import groups as group_repository

router = APIRouter(prefix="/group", tags=["Groups"])


@router.get("", response_model=list[GroupRead])
async def list_groups(db: AsyncSession = Depends(get_db)) -> list[GroupRead]:
    """List all groups ordered by id."""
    with translate_store_errors("Error fetching all groups"):
        groups = await group_repository.list_groups(db)
    return [GroupRead.model_validate(group) for group in groups]


@router.post("", response_model=GroupRead)
async def create_group(payload: GroupCreate, db: AsyncSession = Depends(get_db)) -> GroupRead:
    """Create a group and return the stored record."""
    with translate_store_errors("Error creating group"):
        group = await group_repository.create_group(db, **payload.model_dump())
    return GroupRead.model_validate(group)


@router.get("/{group_id}", response_model=GroupWithUsers | list[GroupWithUsers])
async def get_group(
    group_id: int,
    db: AsyncSession = Depends(get_db),
) -> GroupWithUsers | list[GroupWithUsers]:
    """Return a group together with its member users."""
    with translate_store_errors("Error getting group by id"):
        group = await group_repository.get_group_with_users(db, group_id)
    if group is None:
        raise NotFoundError(Message.GROUP_NOT_FOUND)

    body = GroupWithUsers.model_validate(group)
    if settings.WRAP_ASSOCIATION_RESPONSES:
        return [body]
    return body


@router.put("/{group_id}", response_model=MessageResponse)
async def update_group(
    group_id: int,
    payload: GroupUpdate,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Update only the group fields present in the body."""
    with translate_store_errors("Error updating group by id"):
        affected = await group_repository.update_group(
            db, group_id, **payload.model_dump(exclude_unset=True)
        )
    if not affected:
        raise NotFoundError(Message.GROUP_NOT_FOUND)
    return MessageResponse(message=Message.GROUP_UPDATED)


@router.delete("/{group_id}", response_model=MessageResponse)
async def delete_group(group_id: int, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    with translate_store_errors("Error deleting group"):
        deleted = await group_repository.delete_group(db, group_id)
    if not deleted:
        raise NotFoundError(Message.GROUP_NOT_FOUND)
    return MessageResponse(message=Message.GROUP_DELETED)
