"""
Application exception hierarchy.

All API-facing exceptions inherit from ApiError so the exception handlers
in `app.api.errors` can render them uniformly.  Each exception carries the
HTTP status it maps to, a human-readable message and, where one exists,
the underlying store/parser error text.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base exception for all errors surfaced as JSON responses."""

    status_code: int = 400

    def __init__(self, message: str, *, error: str | None = None) -> None:
        self.message = message
        self.error = error
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class ValidationError(ApiError):
    """Required field missing, unparsable, or rejected by a store constraint."""

    status_code = 400


class NotFoundError(ApiError):
    """Referenced id has no row."""

    status_code = 404


class StoreError(ApiError):
    """Connection or query failure in the storage engine."""

    status_code = 400
