"""
User model — people who belong to groups and own tasks.

No format validation is applied to email or phone_number.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.models.base import Base, TimestampMixin
from app.db.models.user_group import user_groups

if TYPE_CHECKING:
    from app.db.models.group import Group
    from app.db.models.task import Task


class User(TimestampMixin, Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships are only ever loaded explicitly (see repositories)
    groups: Mapped[list[Group]] = relationship(
        secondary=user_groups,
        back_populates="users",
        order_by="Group.id",
        lazy="raise",
        passive_deletes=True,
    )
    tasks: Mapped[list[Task]] = relationship(
        back_populates="user",
        order_by="Task.id",
        lazy="raise",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} {self.email}>"
