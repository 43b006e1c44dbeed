"""Error Translator: typed failures and unhandled exceptions -> JSON error envelope.

Invariants:
    - Err(kind, message) -> status kind.http_status, body ErrorResponse
    - RequestValidationError -> 400 with validationErrors keyed by field
    - HTTPException (unknown route, wrong method, ...) -> same envelope, its own status
    - Exception (catch-all) -> 500, never leaks internal details
    - Envelope is always JSON, whatever the negotiated success media type

Design Decisions:
    - Handlers registered by register_error_handlers(app), called from main.py
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from computer_keys.core import messages
from computer_keys.core.errors import ErrorKind, reason_phrase
from computer_keys.core.outcome import Err
from computer_keys.codec.validation import format_validation_errors
from computer_keys.schemas.error import ErrorResponse
from computer_keys.schemas.ssh_key import SSH_KEY_REQUIRED_MESSAGES

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: str | None,
    validation_errors: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the error envelope for any status."""
    body = ErrorResponse(
        status=status_code,
        error=reason_phrase(status_code),
        message=message,
        validation_errors=validation_errors,
    )
    return JSONResponse(status_code=status_code, content=body.to_response())


def failure_response(err: Err, request: Request | None = None) -> JSONResponse:
    """Translate a service failure into its HTTP response."""
    logger.warning(
        f"{err.kind.value}: {err.message}",
        extra={
            "error_code": err.kind.value,
            "path": request.url.path if request else None,
        },
    )
    return error_response(err.http_status, err.message, err.validation_errors)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request validation errors with per-field messages."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": ErrorKind.VALIDATION.value},
        )
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            messages.VALIDATION_FAILED,
            format_validation_errors(exc.errors(), SSH_KEY_REQUIRED_MESSAGES),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework-raised HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes, unsupported methods and similar."""
        message = exc.detail if isinstance(exc.detail, str) else None
        response = error_response(exc.status_code, message)
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": ErrorKind.INTERNAL.value},
        )
        return error_response(
            ErrorKind.INTERNAL.http_status, messages.INTERNAL_ERROR,
        )
