"""User request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Request payload for creating a user. Every field is required."""

    name: str
    email: str
    phone_number: str
    address: str


class UserUpdate(BaseModel):
    """Partial update; only the fields present in the body are applied."""

    name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone_number: str
    address: str
    created_at: datetime
    updated_at: datetime
