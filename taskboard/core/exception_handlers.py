"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain, store and
framework exceptions to HTTP responses in the envelope shape
{success: false, message, errors?}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.core.config import get_settings
from taskboard.domain.exceptions import TaskboardException, ValidationFailedException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "DUPLICATE_EMAIL": 400,
    "INVALID_CREDENTIALS": 401,
    "AUTHENTICATION_ERROR": 401,
    "MISSING_CREDENTIALS": 401,
    "TOKEN_EXPIRED": 401,
    "INVALID_TOKEN": 401,
    "FORBIDDEN": 403,
    "RESOURCE_NOT_FOUND": 404,
    "UPDATE_FAILED": 500,
    "DELETE_FAILED": 500,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_body(message: str, errors: list[dict[str, str]] | None = None) -> dict[str, Any]:
    """Envelope for a failed request."""
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return body


def _taskboard_exception_handler(
    request: Request, exc: TaskboardException
) -> JSONResponse:
    """Return the envelope for a domain exception with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    errors = exc.errors if isinstance(exc, ValidationFailedException) else None
    return JSONResponse(status_code=status, content=error_body(exc.message, errors))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with field errors (path and query parameter coercion)."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("path", "query", "body")]
        errors.append({"field": ".".join(loc) or "request", "message": str(error.get("msg"))})
    return JSONResponse(status_code=400, content=error_body("Validation error", errors))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Envelope for Starlette HTTP exceptions.

    An unknown path and a known path with an unsupported method are both
    answered as an unmatched route: 404 naming the path and query string.
    """
    if exc.status_code == 405 or (exc.status_code == 404 and exc.detail == "Not Found"):
        return JSONResponse(
            status_code=404,
            content=error_body(f"Route {_original_url(request)} not found"),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def _original_url(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def _internal_error(exc: Exception) -> JSONResponse:
    """500 envelope; diagnostic detail only outside production."""
    settings = get_settings()
    if settings.is_production:
        content = error_body(INTERNAL_ERROR_MESSAGE)
    else:
        content = error_body(
            f"{INTERNAL_ERROR_MESSAGE}: {exc}",
            [{"field": "exception", "message": exc.__class__.__name__}],
        )
    return JSONResponse(status_code=500, content=content)


def _store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Store faults propagate unwrapped from the workflows and end here."""
    logger.exception("Store error on %s %s", request.method, request.url.path)
    return _internal_error(exc)


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500 for anything unrecognized."""
    logger.exception("Unhandled exception: %s", exc)
    return _internal_error(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskboardException (and
    subclasses), RequestValidationError, StarletteHTTPException,
    SQLAlchemyError, generic Exception.
    """
    app.add_exception_handler(TaskboardException, _taskboard_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _store_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
