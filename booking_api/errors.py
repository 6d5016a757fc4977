"""
Error taxonomy for the booking API.

Every failure a handler reports is an AppError subclass; main.py renders them
all as the JSON envelope {"error": message, "details": ...}.
"""

import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class NotFoundError(AppError):
    status_code = 404


class TenantNotFoundError(NotFoundError):
    def __init__(self, message: str = "Tenant not found", details: Optional[Any] = None):
        super().__init__(message, details)


class TenantOwnershipError(NotFoundError):
    """Resource belongs to another tenant; reported exactly like a missing resource"""


class BookingNotFoundError(NotFoundError):
    def __init__(self, message: str = "Booking not found", details: Optional[Any] = None):
        super().__init__(message, details)


class ValidationError(AppError):
    status_code = 400


class ConflictError(AppError):
    status_code = 400


class UpstreamServiceError(AppError):
    status_code = 500


class InternalError(AppError):
    status_code = 500


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path} failed: {exc.message} ({exc.details})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 with the field errors attached"""
    details = [
        {"loc": list(error.get("loc", [])), "msg": error.get("msg")} for error in exc.errors()
    ]
    logger.warning(f"⚠️ Invalid request for {request.url.path}: {details}")
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})
