"""
Models package — re-exports Base and all models.

Import models here so `Base.metadata` picks up every table automatically.

When adding a new model:
    1. Create `app/db/models/<table_name>.py`
    2. Import it here
"""

from app.db.models.base import Base
from app.db.models.user_group import user_groups
from app.db.models.user import User
from app.db.models.group import Group
from app.db.models.task import Task

__all__ = [
    "Base",
    "user_groups",
    "User",
    "Group",
    "Task",
]
