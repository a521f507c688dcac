# tests/test_session.py

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from app.db.models import Group
from app.db.session import get_db


async def _count_groups(session_factory) -> int:
    async with session_factory() as session:
        return await session.scalar(select(func.count()).select_from(Group))


async def test_get_db_commits_when_handler_succeeds(session_factory) -> None:
    gen = get_db(session_factory)
    session = await gen.__anext__()
    session.add(Group(name="Eng", description="Builds"))
    await session.flush()

    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()

    assert await _count_groups(session_factory) == 1


async def test_get_db_rolls_back_when_handler_raises(session_factory) -> None:
    gen = get_db(session_factory)
    session = await gen.__anext__()
    session.add(Group(name="Eng", description="Builds"))
    await session.flush()

    with pytest.raises(RuntimeError):
        await gen.athrow(RuntimeError("handler failed"))

    assert await _count_groups(session_factory) == 0


async def test_failed_request_leaves_no_partial_write(client) -> None:
    resp = await client.post("/group", json={"name": "Eng", "description": "Builds"})
    group_id = resp.json()["id"]

    failed = await client.put(f"/group/{group_id}", json={"name": None})
    assert failed.status_code == 400

    [stored] = (await client.get("/group")).json()
    assert stored["name"] == "Eng"
