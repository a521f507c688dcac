"""Shared dependencies for API routes."""

from app.db.session import get_db, get_session_factory

__all__ = ["get_db", "get_session_factory"]
