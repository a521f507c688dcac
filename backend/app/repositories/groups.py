"""Group repository — data-access operations for the groups table."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.group import Group
from app.repositories import base

UPDATABLE_FIELDS = frozenset({"name", "description"})


async def list_groups(db: AsyncSession) -> list[Group]:
    """List all groups ordered by id."""
    return await base.list_all(db, Group)


async def create_group(db: AsyncSession, *, name: str, description: str) -> Group:
    """Create a new group."""
    return await base.create(db, Group, name=name, description=description)


async def get_group_by_id(db: AsyncSession, group_id: int) -> Group | None:
    """Fetch a group by primary key."""
    return await base.get_by_id(db, Group, group_id)


async def get_group_with_users(db: AsyncSession, group_id: int) -> Group | None:
    """Fetch a group with its member users."""
    return await base.get_with_association(db, Group, group_id, Group.users)


async def update_group(db: AsyncSession, group_id: int, **fields: object) -> int:
    """Update the given group fields. Returns the affected row count."""
    values = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    return await base.update_by_id(db, Group, group_id, **values)


async def delete_group(db: AsyncSession, group_id: int) -> int:
    """Hard-delete a group and, via cascade, its memberships."""
    return await base.delete_by_id(db, Group, group_id)
