"""
User repository containing all data-access operations for the users table
and its memberships in user_groups.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.group import Group
from app.db.models.user import User
from app.db.models.user_group import user_groups
from app.repositories import base

UPDATABLE_FIELDS = frozenset({"name", "email", "phone_number", "address"})


async def list_users(db: AsyncSession) -> list[User]:
    """List all users ordered by id."""
    return await base.list_all(db, User)


async def create_user(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    phone_number: str,
    address: str,
) -> User:
    """Create a new user."""
    return await base.create(
        db,
        User,
        name=name,
        email=email,
        phone_number=phone_number,
        address=address,
    )


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user by primary key."""
    return await base.get_by_id(db, User, user_id)


async def get_user_with_groups(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user with the groups they belong to."""
    return await base.get_with_association(db, User, user_id, User.groups)


async def get_user_with_tasks(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user with the tasks they own."""
    return await base.get_with_association(db, User, user_id, User.tasks)


async def update_user(db: AsyncSession, user_id: int, **fields: object) -> int:
    """Update the given user fields. Returns the affected row count."""
    values = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    return await base.update_by_id(db, User, user_id, **values)


async def delete_user(db: AsyncSession, user_id: int) -> int:
    """
    Hard-delete a user. Returns the affected row count.

    Memberships are removed and owned tasks unassigned by the foreign
    key actions on user_groups and tasks.
    """
    return await base.delete_by_id(db, User, user_id)


async def is_member(db: AsyncSession, user_id: int, group_id: int) -> bool:
    """Return True when the user already belongs to the group."""
    stmt = select(user_groups.c.user_id).where(
        user_groups.c.user_id == user_id,
        user_groups.c.group_id == group_id,
    )
    result = await db.execute(stmt)
    return result.first() is not None


async def add_to_group(db: AsyncSession, user: User, group: Group) -> bool:
    """
    Add a membership row for (user, group).

    Returns False without writing when the membership already exists.
    """
    if await is_member(db, user.id, group.id):
        return False
    await db.execute(insert(user_groups).values(user_id=user.id, group_id=group.id))
    await db.flush()
    return True
