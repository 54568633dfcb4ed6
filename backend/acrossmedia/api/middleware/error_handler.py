"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Approval link is invalid or has expired",
            "details": {}
        }
    }

Exception Handling:
===================
1. AcrossMediaException subclasses → their status_code and to_dict()
2. Request validation errors       → 400 with a field → message map
3. Other exceptions                → 500 with generic message (details hidden)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from acrossmedia.shared.core.exceptions import AcrossMediaException
from acrossmedia.shared.core.logging import logger


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    """Flatten pydantic errors to {"field": "message"}; the first error per field wins."""
    fields: dict[str, str] = {}
    for error in exc.errors():
        # loc is ("body", "email") / ("query", "page") / ("path", "video_id")
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        name = ".".join(location) or "request"
        fields.setdefault(name, error.get("msg", "Invalid value"))
    return fields


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AcrossMediaException)
    async def acrossmedia_exception_handler(
        request: Request,
        exc: AcrossMediaException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from AcrossMediaException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request bodies, queries and paths that fail their schema."""
        fields = _field_errors(exc)
        logger.warning(
            "Validation error",
            fields=fields,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"fields": fields},
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
