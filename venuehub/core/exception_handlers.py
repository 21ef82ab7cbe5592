"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every failure is rendered as
the response envelope {"success": false, "data": null, "message", "error_code"}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from venuehub.core.config import get_settings
from venuehub.domain.exceptions import VenueHubException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "ACCESS_DENIED": 403,
    "RESOURCE_NOT_FOUND": 404,
    "STORE_FAILURE": 500,
    "STORE_NOT_CONFIGURED": 503,
}


def _failure(status_code: int, message: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "data": None,
            "message": message,
            "error_code": error_code,
        },
    )


def _venuehub_exception_handler(request: Request, exc: VenueHubException) -> JSONResponse:
    """Return the envelope from VenueHubException.to_dict() with the mapped status."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _describe_validation_error(error: dict[str, Any]) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    where = ".".join(loc)
    return f"{where}: {error.get('msg', 'invalid')}" if where else error.get("msg", "invalid")


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 naming the first invalid or missing field."""
    errors = exc.errors()
    message = _describe_validation_error(errors[0]) if errors else "Request validation failed"
    return _failure(400, message, "VALIDATION_ERROR")


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the envelope for Starlette HTTP exceptions (unknown routes, 405, ...)."""
    return _failure(exc.status_code, str(exc.detail), "HTTP_ERROR")


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail = str(exc) if settings.debug else "Internal server error"
    return _failure(500, detail, "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: VenueHubException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(VenueHubException, _venuehub_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
