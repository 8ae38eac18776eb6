"""Error Handlers: global exception handlers for the intake API.

Invariants:
    - EmployeeIntakeError → the error's own to_response() body and http_status
    - RequestValidationError → {"errors": [...]} with the same violation shape as field rules
    - Exception (catch-all) → {"error": "Internal Server Error"}, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (EmployeeIntakeError), request parsing (FastAPI), catch-all (Exception)
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    EmployeeIntakeError, ErrorSeverity, FieldViolation, INTERNAL_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_intake_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_intake_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(EmployeeIntakeError)
    async def intake_error_handler(request: Request, exc: EmployeeIntakeError):
        """Handle all intake domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.WARNING
        )
        logger.log(
            level, f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request parsing error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True, extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the {"errors": [...]} body from FastAPI's error list."""
    violations = [
        FieldViolation(
            field=".".join(str(loc) for loc in e["loc"] if loc != "body") or "body",
            code=e["type"],
            message=e["msg"],
        )
        for e in exc.errors()
    ]
    return {"errors": [v.to_dict() for v in violations]}
