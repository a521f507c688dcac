"""Task request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TaskCreate(BaseModel):
    """Request payload for creating a task. `deadline` is an ISO-8601 timestamp."""

    name: str
    deadline: datetime


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    deadline: datetime
    user_id: int | None
    created_at: datetime
    updated_at: datetime
