"""
Centralized exception handlers for the FastAPI application.

Every failure leaves the API in the same envelope as a success:

    {
        "success": false,
        "message": "Human-readable error message",
        "error": "MACHINE_READABLE_ERROR_CODE",
        "details": {...}
    }

Usage:
    from api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import DependencyError, MethodNotAllowedError, PetPalError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"
DEPENDENCY_ERROR_MESSAGE = "A required service is temporarily unavailable"


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    details: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    body = ErrorResponse(message=message, error=code, details=details or None)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_from_location(loc: tuple[Any, ...]) -> Optional[str]:
    # ("body", "age") -> "age"; ("query", "petId") -> "petId"
    parts = [str(p) for p in loc[1:] if not isinstance(p, int)]
    return ".".join(parts) or None


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers on the FastAPI application.

    This should be called during app initialization so that every
    PetPalError, request parsing failure and routing failure is
    answered with the standard envelope.
    """

    @app.exception_handler(DependencyError)
    async def dependency_exception_handler(
        request: Request,
        exc: DependencyError,
    ) -> JSONResponse:
        """Log the underlying cause and send the client a generic message."""
        logger.error(
            "Dependency failure on %s %s: %s (service=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.service,
            exc_info=exc,
        )
        return _create_error_response(
            status_code=exc.status_code,
            message=DEPENDENCY_ERROR_MESSAGE,
            code=exc.code,
        )

    @app.exception_handler(PetPalError)
    async def petpal_exception_handler(
        request: Request,
        exc: PetPalError,
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Server error on %s %s: %s (code=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code,
                exc_info=exc,
            )
        else:
            logger.info(
                "Request rejected on %s %s: %s (code=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code,
            )

        headers = None
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}

        return _create_error_response(
            status_code=exc.status_code,
            message=exc.message,
            code=exc.code,
            details=exc.details,
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report malformed bodies and parameters as 400, naming the first bad field."""
        errors = exc.errors()
        field = _field_from_location(tuple(errors[0].get("loc", ()))) if errors else None
        message = f"Invalid value for {field}" if field else "Invalid request body"
        logger.info("Malformed request on %s %s: %s", request.method, request.url.path, message)
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            code="INVALID_FIELD",
            details={"field": field} if field else None,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Wrap routing errors (unknown path, wrong verb) in the envelope."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            error = MethodNotAllowedError(request.method)
            return _create_error_response(
                status_code=error.status_code,
                message=error.message,
                code=error.code,
                details=error.details,
                headers=getattr(exc, "headers", None),
            )
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return _create_error_response(
                status_code=exc.status_code,
                message="Not found",
                code="NOT_FOUND",
            )
        return _create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            code="HTTP_ERROR",
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=GENERIC_ERROR_MESSAGE,
            code="INTERNAL_ERROR",
        )
