"""
Model-agnostic query primitives shared by every entity repository.

Every helper takes the mapped class as its second argument, so the
entity modules stay thin wrappers that only fix the model and name the
association they traverse.
"""

from __future__ import annotations

from typing import Any, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.attributes import InstrumentedAttribute

from app.db.models.base import Base, utcnow

ModelT = TypeVar("ModelT", bound=Base)


async def list_all(db: AsyncSession, model: type[ModelT]) -> list[ModelT]:
    """Return every row ordered by id ascending."""
    result = await db.execute(select(model).order_by(model.id.asc()))
    return list(result.scalars().all())


async def create(db: AsyncSession, model: type[ModelT], **fields: Any) -> ModelT:
    """Insert a row and return it with its generated id and timestamps."""
    row = model(**fields)
    db.add(row)
    await db.flush()
    return row


async def get_by_id(db: AsyncSession, model: type[ModelT], row_id: int) -> ModelT | None:
    """Fetch a row by primary key."""
    return await db.get(model, row_id)


async def get_with_association(
    db: AsyncSession,
    model: type[ModelT],
    row_id: int,
    association: InstrumentedAttribute,
) -> ModelT | None:
    """
    Fetch a row together with one association in a single JOIN query.

    For many-to-many associations the join runs through the association
    table, whose columns are never mapped onto the result.
    """
    stmt = (
        select(model)
        .where(model.id == row_id)
        .options(joinedload(association))
    )
    result = await db.execute(stmt)
    return result.unique().scalar_one_or_none()


async def update_by_id(
    db: AsyncSession,
    model: type[ModelT],
    row_id: int,
    **fields: Any,
) -> int:
    """Apply a partial update. Returns the number of affected rows (0 or 1)."""
    stmt = (
        update(model)
        .where(model.id == row_id)
        .values(**fields, updated_at=utcnow())
    )
    result = await db.execute(stmt)
    await db.flush()
    return result.rowcount


async def delete_by_id(db: AsyncSession, model: type[ModelT], row_id: int) -> int:
    """Hard-delete a row. Returns the number of affected rows (0 or 1)."""
    stmt = delete(model).where(model.id == row_id)
    result = await db.execute(stmt)
    await db.flush()
    return result.rowcount
