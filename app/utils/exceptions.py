"""
Service error taxonomy and the handlers that render errors into the API envelope.
"""
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.utils.logger_utils import logger
from app.utils.response_utils import response_api


class ServiceError(HTTPException):
    """Base for errors raised by the service layer.

    These are HTTPExceptions so they propagate through FastAPI exactly like
    the framework's own errors; ``message`` becomes the envelope message,
    ``error`` carries the underlying cause and ``data`` any payload the caller
    needs to reconcile (e.g. the id of a record that was created before a
    later step failed).
    """

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: str = "", data: Optional[Any] = None):
        super().__init__(status_code=self.http_status, detail=message)
        self.message = message
        self.error = error
        self.data = data


class ValidationError(ServiceError):
    """Missing or malformed required input."""

    http_status = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """Referenced record is absent."""

    http_status = status.HTTP_404_NOT_FOUND


class StoreError(ServiceError):
    """Underlying persistence failure."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return response_api(
        exc.status_code,
        message,
        data=getattr(exc, "data", None),
        error=getattr(exc, "error", ""),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning(f"Invalid request body for {request.method} {request.url.path}: {details}")
    return response_api(status.HTTP_400_BAD_REQUEST, "Invalid request body", error=details)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return response_api(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", error=str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
