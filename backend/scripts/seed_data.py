"""
Seed demo users, groups, memberships and tasks for development.
Run: python -m scripts.seed_data  (from backend/)
"""

import asyncio
from datetime import datetime, timedelta, timezone

from app.db.models import Base
from app.db.session import async_session, engine
from app.repositories import groups as group_repository
from app.repositories import tasks as task_repository
from app.repositories import users as user_repository


SEED_USERS = [
    {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone_number": "+44 20 7946 0001",
        "address": "12 St James's Square, London",
    },
    {
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "phone_number": "+1 202 555 0102",
        "address": "1 Navy Yard, Washington DC",
    },
]

SEED_GROUPS = [
    {"name": "Engineering", "description": "Builds and runs the product"},
    {"name": "Operations", "description": "Keeps the lights on"},
]

# (user index, group index)
SEED_MEMBERSHIPS = [(0, 0), (1, 0), (1, 1)]

# (task name, days until deadline, owner index or None)
SEED_TASKS = [
    ("Write release notes", 3, 0),
    ("Rotate on-call", 7, 1),
    ("Triage backlog", 14, None),
]


async def seed():
    """Insert seed rows."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    now = datetime.now(timezone.utc)
    async with async_session() as session:
        users = [await user_repository.create_user(session, **data) for data in SEED_USERS]
        for user in users:
            print(f"  Created user: {user.id} {user.email}")

        groups = [await group_repository.create_group(session, **data) for data in SEED_GROUPS]
        for group in groups:
            print(f"  Created group: {group.id} {group.name}")

        for user_idx, group_idx in SEED_MEMBERSHIPS:
            await user_repository.add_to_group(session, users[user_idx], groups[group_idx])

        for name, days, owner_idx in SEED_TASKS:
            task = await task_repository.create_task(
                session, name=name, deadline=now + timedelta(days=days)
            )
            if owner_idx is not None:
                await task_repository.assign_to_user(session, task.id, users[owner_idx].id)
            print(f"  Created task: {task.id} {task.name}")

        await session.commit()

    await engine.dispose()
    print(
        f"Seeded {len(SEED_USERS)} users, {len(SEED_GROUPS)} groups, "
        f"{len(SEED_MEMBERSHIPS)} memberships, {len(SEED_TASKS)} tasks."
    )


if __name__ == "__main__":
    asyncio.run(seed())
