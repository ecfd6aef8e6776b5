"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict, Optional, Tuple
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from app.application.dto.base_dto import ErrorResponseDTO
from app.domain.models.base import DomainException, ErrorCode

logger = logging.getLogger(__name__)


DOMAIN_ERROR_STATUS: Dict[ErrorCode, Tuple[int, str]] = {
    ErrorCode.ENTITY_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Not Found"),
    ErrorCode.VALIDATION_ERROR: (status.HTTP_400_BAD_REQUEST, "Validation Error"),
    ErrorCode.INVALID_ARGUMENT: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    ErrorCode.DUPLICATE_ENTITY: (status.HTTP_409_CONFLICT, "Conflict"),
    ErrorCode.DOMAIN_ERROR: (status.HTTP_400_BAD_REQUEST, "Domain Error"),
}


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """Build the JSON error body shared by every handler."""
    body = ErrorResponseDTO(
        error=error,
        message=message,
        code=code,
        path=request.url.path,
        details=details
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True)
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    def __init__(self, app, debug: bool = False, expose_errors: bool = False):
        super().__init__(app)
        self.debug = debug
        self.expose_errors = expose_errors

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        status_code, error, message, code = self.classify(exc)

        if status_code >= 500:
            # Log the full exception with traceback
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                    "client_host": request.client.host if request.client else None
                }
            )
        else:
            logger.info(f"{request.method} {request.url.path} -> {status_code}: {message}")

        details = self.exception_details(exc)

        # In debug mode, add more information
        if self.debug:
            details = dict(details or {})
            details["exception_type"] = type(exc).__name__
            details["traceback"] = traceback.format_exception(type(exc), exc, exc.__traceback__)

        return error_response(request, status_code, error, message, code, details)

    def classify(self, exc: Exception) -> Tuple[int, str, str, Optional[str]]:
        """
        Map an exception to (status code, error label, message, error code).
        """
        if isinstance(exc, DomainException):
            status_code, error = DOMAIN_ERROR_STATUS.get(
                exc.code, DOMAIN_ERROR_STATUS[ErrorCode.DOMAIN_ERROR]
            )
            return status_code, error, exc.message, exc.code.value

        if isinstance(exc, IntegrityError):
            # Unique constraint hit by a concurrent request
            return (
                status.HTTP_409_CONFLICT,
                "Conflict",
                "The request conflicts with an existing resource",
                ErrorCode.DUPLICATE_ENTITY.value
            )

        message = str(exc) if self.expose_errors else "Something went wrong"
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", message, None

    @staticmethod
    def exception_details(exc: Exception) -> Optional[Dict[str, Any]]:
        """Extra fields worth returning for a domain failure."""
        errors = getattr(exc, "errors", None)
        if isinstance(exc, DomainException) and isinstance(errors, list):
            return {"errors": errors}
        return None


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 validation errors."""
    errors = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    ]
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Validation Error",
        f"Validation failed: {', '.join(errors)}",
        ErrorCode.VALIDATION_ERROR.value,
        {"errors": errors}
    )
