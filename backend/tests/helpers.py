# tests/helpers.py

from __future__ import annotations

from typing import Any

from httpx import AsyncClient


async def create_user(client: AsyncClient, name: str = "Ada", **overrides: Any) -> dict[str, Any]:
    payload = {
        "name": name,
        "email": f"{name.lower()}@example.com",
        "phone_number": "+1 555 0100",
        "address": "1 Main St",
        **overrides,
    }
    resp = await client.post("/user", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()


async def create_group(
    client: AsyncClient,
    name: str = "Engineering",
    description: str = "Builds things",
) -> dict[str, Any]:
    resp = await client.post("/group", json={"name": name, "description": description})
    assert resp.status_code == 200, resp.text
    return resp.json()


async def create_task(
    client: AsyncClient,
    name: str = "Ship",
    deadline: str = "2024-01-01T00:00:00Z",
) -> dict[str, Any]:
    resp = await client.post("/task", json={"name": name, "deadline": deadline})
    assert resp.status_code == 200, resp.text
    return resp.json()
