"""Error Handlers: global exception handlers for the orders API.

Invariants:
    - Every error body carries a top-level "message" string
    - GrubDashError → its own http_status and to_response() body
    - RequestValidationError (malformed JSON, wrong envelope types) → 400 with field details
    - Unknown path → 404 "Path not found: ..."; wrong method → 405 "... not allowed for ..."
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from grubdash.core.errors import GrubDashError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(GrubDashError)
    async def grubdash_error_handler(request: Request, exc: GrubDashError):
        """Handle validation, not-found and conflict errors from the service."""
        logger.warning(
            f"GrubDashError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
                "order_id": exc.context.order_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic envelope errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing errors (unknown path, unsupported method) in the shared error shape."""
        message = _http_error_message(request, exc)
        logger.warning(
            message,
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "message": message,
                "error": {
                    "code": f"HTTP_{exc.status_code}",
                    "category": (
                        ErrorCategory.RESOURCE_NOT_FOUND.value
                        if exc.status_code == status.HTTP_404_NOT_FOUND
                        else ErrorCategory.VALIDATION.value
                    ),
                    "severity": ErrorSeverity.ERROR.value,
                },
            },
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "An unexpected error occurred",
                "error": {
                    "code": "INTERNAL_ERROR",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _http_error_message(request: Request, exc: StarletteHTTPException) -> str:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return f"Path not found: {request.url.path}"
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return f"{request.method} not allowed for {request.url.path}"
    return str(exc.detail)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "message": "Invalid request data",
        "error": {
            "code": "VALIDATION_ERROR",
            "category": ErrorCategory.VALIDATION.value,
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
