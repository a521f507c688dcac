"""Response schemas shared by every router."""

from __future__ import annotations

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by update/delete/attach endpoints."""

    message: str
