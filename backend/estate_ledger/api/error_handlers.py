"""Error Handlers — global exception handlers for the ledger API.

Invariants:
    - LedgerError values → structured JSON with code, kind, message, severity
    - Ledger errors are logged once, by LedgerDispatch; this layer adds only the path
    - RequestValidationError → field-level error details (400)
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Core returns errors as values; routes wrap them in LedgerErrorResponse so
      one handler owns the HTTP mapping (ADR: uniform error shape)
    - Three-layer handler: ledger, validation (Pydantic), catch-all (Exception)
"""

import logging
from typing import TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from estate_ledger.core.errors import ErrorSeverity, LedgerError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LedgerErrorResponse(Exception):
    """Carries a LedgerError value out of a route to the registered handler."""

    def __init__(self, error: LedgerError):
        super().__init__(error.msg)
        self.error = error


def raise_for_error(result: T | LedgerError) -> T:
    """Return result unchanged, or raise LedgerErrorResponse if it is an error value."""
    if isinstance(result, LedgerError):
        raise LedgerErrorResponse(result)
    return result


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_ledger_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_ledger_error_handler(app: FastAPI) -> None:
    """Register ledger error-value handler."""

    @app.exception_handler(LedgerErrorResponse)
    async def ledger_error_handler(request: Request, exc: LedgerErrorResponse):
        error = exc.error
        logger.debug(
            f"{error.http_status} {request.url.path}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "INVALID_INPUT",
            "kind": "invalid_input",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
