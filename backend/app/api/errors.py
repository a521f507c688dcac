"""
Error translation between the data-access layer and HTTP responses.

Routers wrap repository calls in `translate_store_errors(...)`, which turns
SQLAlchemy/driver failures into the application's ApiError hierarchy; the
handlers registered by `register_exception_handlers` render every ApiError
as JSON:

    400  {"message": ..., "error": ...}
    404  {"message": ...}
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, SQLAlchemyError

from app.core.constants import Message
from app.core.errors import ApiError, NotFoundError, StoreError, ValidationError
from app.core.logging import get_logger

logger = get_logger(__name__)


def describe_store_error(exc: Exception) -> str:
    """Return the driver's message when available, else the exception text."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


@contextmanager
def translate_store_errors(message: str) -> Iterator[None]:
    """
    Re-raise failures inside the block as ValidationError/StoreError.

    ApiErrors pass through untouched; anything else unexpected becomes a
    StoreError so the client always gets a JSON body.
    """
    try:
        yield
    except ApiError:
        raise
    except (IntegrityError, DataError) as exc:
        raise ValidationError(message, error=describe_store_error(exc)) from exc
    except (SQLAlchemyError, OSError) as exc:
        raise StoreError(message, error=describe_store_error(exc)) from exc
    except Exception as exc:
        logger.exception("Unexpected error", message=message)
        raise StoreError(message, error=str(exc)) from exc


def describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if isinstance(exc, NotFoundError):
        logger.info("Not found", path=request.url.path, message=exc.message)
    else:
        logger.warning(
            "Request failed",
            path=request.url.path,
            method=request.method,
            message=exc.message,
            error=exc.error,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError(Message.INVALID_REQUEST, error=describe_validation_error(exc))
    return await api_error_handler(request, error)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error renderers to the application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
