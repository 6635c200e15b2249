"""Error Handlers — global exception handlers for the Roster API.

Invariants:
    - RosterError → structured JSON with error code, message, severity, and its own status
    - RequestValidationError → 400 INVALID_INPUT envelope with field-level details
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - Every envelope is produced by RosterError.to_response(): one shape for clients

Design Decisions:
    - Three-layer handler: domain (RosterError), validation (Pydantic), catch-all (Exception)
    - Caller errors logged at warning, infrastructure errors at error
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from roster.core.errors import (
    ErrorCategory, ErrorSeverity, InvalidInputError, RosterError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_roster_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_roster_error_handler(app: FastAPI) -> None:
    """Register Roster domain/infrastructure error handler."""

    @app.exception_handler(RosterError)
    async def roster_error_handler(request: Request, exc: RosterError):
        """Handle all Roster domain/infrastructure errors."""
        level = logging.WARNING if exc.is_client_error else logging.ERROR
        logger.log(
            level,
            f"RosterError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler: malformed bodies and ids are InvalidInput."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = _validation_details(exc)
        logger.warning(
            f"Validation error on {request.url.path}: {details}",
            extra={"error_code": "INVALID_INPUT", "path": request.url.path},
        )
        error = InvalidInputError(
            "Invalid request data", details[0]["field"] if details else "body",
        )
        content = error.to_response()
        content["error"]["details"] = details
        return JSONResponse(status_code=error.http_status, content=content)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        error = RosterError(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _validation_details(exc: RequestValidationError) -> list[dict]:
    """Field-level details, located without the body/path/query prefix."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"][1:]) or str(e["loc"][0]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
