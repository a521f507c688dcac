# tests/test_repositories.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.db.models import Group, Task, User, user_groups
from app.repositories import base
from app.repositories import groups as group_repository
from app.repositories import tasks as task_repository
from app.repositories import users as user_repository

DEADLINE = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def _seed(session_factory) -> tuple[int, int, int]:
    async with session_factory() as session:
        user = await user_repository.create_user(
            session, name="Ada", email="ada@example.com", phone_number="1", address="A"
        )
        group = await group_repository.create_group(session, name="Eng", description="Builds")
        task = await task_repository.create_task(session, name="Ship", deadline=DEADLINE)
        await session.commit()
        return user.id, group.id, task.id


async def test_create_populates_id_and_timestamps(session_factory) -> None:
    async with session_factory() as session:
        user = await user_repository.create_user(
            session, name="Ada", email="ada@example.com", phone_number="1", address="A"
        )

        assert user.id is not None
        assert user.created_at is not None
        assert user.updated_at is not None


async def test_update_by_id_reports_affected_rows(session_factory) -> None:
    user_id, group_id, _ = await _seed(session_factory)

    async with session_factory() as session:
        assert await base.update_by_id(session, User, user_id, name="Grace") == 1
        assert await base.update_by_id(session, User, user_id + 100, name="Nobody") == 0
        assert await group_repository.update_group(session, group_id, description="x") == 1
        await session.commit()

    async with session_factory() as session:
        group = await group_repository.get_group_by_id(session, group_id)
        user = await user_repository.get_user_by_id(session, user_id)
        assert group.name == "Eng"
        assert group.description == "x"
        assert user.name == "Grace"


async def test_update_ignores_unknown_fields(session_factory) -> None:
    user_id, _, _ = await _seed(session_factory)

    async with session_factory() as session:
        assert await user_repository.update_user(session, user_id, id=999, email="new@example.com") == 1
        await session.commit()

    async with session_factory() as session:
        user = await user_repository.get_user_by_id(session, user_id)
        assert user.id == user_id
        assert user.email == "new@example.com"


async def test_add_to_group_skips_existing_membership(session_factory) -> None:
    user_id, group_id, _ = await _seed(session_factory)
    async with session_factory() as session:
        second = await group_repository.create_group(session, name="Ops", description="Runs")
        user = await user_repository.get_user_by_id(session, user_id)
        group = await group_repository.get_group_by_id(session, group_id)
        assert await user_repository.add_to_group(session, user, group) is True
        assert await user_repository.add_to_group(session, user, second) is True
        assert await user_repository.add_to_group(session, user, group) is False
        await session.commit()
        second_id = second.id

    async with session_factory() as session:
        loaded = await user_repository.get_user_with_groups(session, user_id)
        assert [g.id for g in loaded.groups] == [group_id, second_id]

    async with session_factory() as session:
        count = await session.scalar(select(func.count()).select_from(user_groups))
        assert count == 2


async def test_get_with_association_missing_row(session_factory) -> None:
    async with session_factory() as session:
        assert await user_repository.get_user_with_groups(session, 1) is None
        assert await group_repository.get_group_with_users(session, 1) is None
        assert await task_repository.get_task_with_user(session, 1) is None


async def test_task_owner_join(session_factory) -> None:
    user_id, _, task_id = await _seed(session_factory)

    async with session_factory() as session:
        task = await task_repository.get_task_with_user(session, task_id)
        assert task.user is None

    async with session_factory() as session:
        assert await task_repository.assign_to_user(session, task_id, user_id) == 1
        await session.commit()

    async with session_factory() as session:
        task = await task_repository.get_task_with_user(session, task_id)
        assert task.user.id == user_id
        owner = await user_repository.get_user_with_tasks(session, user_id)
        assert [t.id for t in owner.tasks] == [task_id]


async def test_assign_to_missing_user_violates_foreign_key(session_factory) -> None:
    _, _, task_id = await _seed(session_factory)

    async with session_factory() as session:
        with pytest.raises(IntegrityError):
            await task_repository.assign_to_user(session, task_id, 4242)


async def test_delete_cascades(session_factory) -> None:
    user_id, group_id, task_id = await _seed(session_factory)
    async with session_factory() as session:
        user = await user_repository.get_user_by_id(session, user_id)
        group = await group_repository.get_group_by_id(session, group_id)
        await user_repository.add_to_group(session, user, group)
        await task_repository.assign_to_user(session, task_id, user_id)
        await session.commit()

    async with session_factory() as session:
        assert await user_repository.delete_user(session, user_id) == 1
        assert await user_repository.delete_user(session, user_id) == 0
        await session.commit()

    async with session_factory() as session:
        task = await session.get(Task, task_id)
        assert task.user_id is None
        assert await session.get(Group, group_id) is not None
        count = await session.scalar(select(func.count()).select_from(user_groups))
        assert count == 0


async def test_list_all_orders_by_id(session_factory) -> None:
    async with session_factory() as session:
        for name in ("c", "a", "b"):
            await task_repository.create_task(session, name=name, deadline=DEADLINE)
        await session.commit()

    async with session_factory() as session:
        tasks = await task_repository.list_tasks(session)
        assert [t.name for t in tasks] == ["c", "a", "b"]
        assert [t.id for t in tasks] == sorted(t.id for t in tasks)
