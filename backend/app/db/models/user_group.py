"""
user_groups — pure association table for the User ↔ Group many-to-many.

Holds only the two foreign keys, which together form the primary key.
There is no mapped class: memberships have no identity of their own and
are never serialized.  Deleting either side cascades to its rows here.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from app.db.models.base import Base

user_groups = Table(
    "user_groups",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    ),
    Column(
        "group_id",
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    ),
)
