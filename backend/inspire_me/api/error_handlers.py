"""Error Handlers — global exception handlers for the Inspire Me API.

Invariants:
    - InspireError → its own to_response() envelope and http_status
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - Log level follows error severity (warning-severity errors log as WARNING)
    - Every handler logs the request path and the topic, when one was sent
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from inspire_me.core.errors import ErrorCategory, ErrorSeverity, InspireError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_inspire_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _log_extra(request: Request, code: str, topic: str | None = None) -> dict:
    """Structured log fields shared by all handlers."""
    if topic is None:
        topic = request.query_params.get("topic")
    return {"error_code": code, "path": request.url.path, "topic": topic}


def _error_body(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
        },
    }


def _register_inspire_error_handler(app: FastAPI) -> None:

    @app.exception_handler(InspireError)
    async def inspire_error_handler(request: Request, exc: InspireError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra=_log_extra(request, exc.code, exc.context.topic),
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Rejected request to {request.url.path}: "
            f"{len(exc.errors())} invalid field(s)",
            extra=_log_extra(request, "VALIDATION_ERROR"),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}: {exc}",
            exc_info=True,
            extra=_log_extra(request, "INTERNAL_ERROR"),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Structured 400 body: one detail entry per failing field."""
    body = _error_body(
        "VALIDATION_ERROR", "Invalid request data",
        ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
    )
    body["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return body
