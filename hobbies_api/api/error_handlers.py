"""Error Handlers — global exception handlers for the Hobbies API.

Invariants:
    - HobbyApiError → envelope with the error's own status code
    - RequestValidationError → 400 envelope listing every violation
    - Starlette HTTPException (unknown route, bad method) → envelope, same status
    - Exception (catch-all) → 500 envelope, never leaks internal details
    - Causes of critical errors are logged here and nowhere else
    - Every HobbyApiError log carries its code, category, severity and context

Design Decisions:
    - Four-layer handler: domain (HobbyApiError), validation (Pydantic),
      routing (HTTPException), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hobbies_api.core.errors import ErrorSeverity, HobbyApiError

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_hobby_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_hobby_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(HobbyApiError)
    async def hobby_error_handler(request: Request, exc: HobbyApiError):
        """Handle all Hobbies API errors raised by handlers."""
        extra = {
            "error_code": exc.code,
            "category": exc.category.value,
            "severity": exc.severity.value,
            "hobby_id": exc.context.hobby_id,
            "operation": exc.context.operation,
            "path": request.url.path,
        }
        if exc.severity == ErrorSeverity.CRITICAL:
            logger.error(
                f"HobbyApiError: {exc.message}",
                extra=extra,
                exc_info=exc.__cause__ or exc,
            )
        else:
            logger.info(f"HobbyApiError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing-level HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
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
            content={"success": False, "error": "Internal server error"},
        )


def _format_location(loc: tuple) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(p) for p in parts)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build envelope whose error lists every violation as 'field: message'."""
    violations = [
        f"{_format_location(e['loc'])}: {e['msg']}" for e in exc.errors()
    ]
    return {
        "success": False,
        "error": ", ".join(violations),
        "message": "Invalid request data",
    }
