"""Error Handlers — global exception handlers for the Cadastro API.

Invariants:
    - CadastroError → {"error", "code"} with the error's own http_status, logged at its severity
    - RequestValidationError → 400 INVALID_PAYLOAD with field-level details
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CadastroError), schema (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module about wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cadastro.api.deps import request_locale
from cadastro.config import get_settings
from cadastro.core.error_messages import get_invalid_payload_message
from cadastro.core.errors import CadastroError, ErrorSeverity

logger = logging.getLogger(__name__)

_SEVERITY_LOG_LEVELS: dict[ErrorSeverity, int] = {
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_cadastro_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_cadastro_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(CadastroError)
    async def cadastro_error_handler(request: Request, exc: CadastroError):
        logger.log(
            _SEVERITY_LOG_LEVELS[exc.severity],
            f"CadastroError: {exc.message}",
            extra={
                "category": exc.category.value,
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        locale = request_locale(request, get_settings())
        content = _build_validation_error_response(
            exc, get_invalid_payload_message(locale),
        )
        # Raw inputs stay out of the log: they may hold passwords
        logger.warning(
            f"Invalid payload on {request.url.path}: {content['details']}",
            extra={"error_code": "INVALID_PAYLOAD", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=content,
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
                "error": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )


def _build_validation_error_response(
    exc: RequestValidationError, message: str,
) -> dict:
    """Build structured invalid-payload response."""
    return {
        "error": message,
        "code": "INVALID_PAYLOAD",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
