# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the service as {"message": ..., "field"?: ...}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class PortalException(Exception):
    """
    Base exception for the portal API.

    All custom exceptions inherit from this class. `code` is kept for
    logs only; the response body carries `message` and, for validation
    failures, the offending `field`.
    """

    def __init__(
        self,
        message: str,
        code: str = "PORTAL_ERROR",
        status_code: int = 500,
        field: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {"message": self.message}
        if self.field:
            result["field"] = self.field
        return result


# =============================================================================
# Auth Exceptions
# =============================================================================

class UnauthorizedError(PortalException):
    """Raised when an admin-only route is called without a valid admin token."""

    def __init__(self):
        super().__init__(
            message="Unauthorized",
            code="UNAUTHORIZED",
            status_code=401,
        )


class InvalidCredentialsError(PortalException):
    """Raised when the admin login password does not match."""

    def __init__(self):
        super().__init__(
            message="Invalid password",
            code="INVALID_CREDENTIALS",
            status_code=401,
        )


# =============================================================================
# Request Exceptions
# =============================================================================

class RecordNotFoundError(PortalException):
    """Raised when a referenced record ID doesn't exist."""

    def __init__(self, entity: str, record_id: int | None = None):
        super().__init__(
            message=f"{entity} not found",
            code="NOT_FOUND",
            status_code=404,
        )
        self.record_id = record_id


# =============================================================================
# Upload Exceptions
# =============================================================================

class NoFileUploadedError(PortalException):
    """Raised when a multipart upload arrives without its file part."""

    def __init__(self, message: str = "No file uploaded"):
        super().__init__(
            message=message,
            code="NO_FILE",
            status_code=400,
        )


class InvalidFileTypeError(PortalException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, content_type: str | None):
        super().__init__(
            message="Invalid file type",
            code="INVALID_FILE_TYPE",
            status_code=400,
        )
        self.content_type = content_type


class FileTooLargeError(PortalException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class StorageNotConfiguredError(PortalException):
    """Raised before any network call when no bucket ID is configured."""

    def __init__(self):
        super().__init__(
            message="Object storage not configured",
            code="STORAGE_NOT_CONFIGURED",
            status_code=500,
        )


class StorageUploadError(PortalException):
    """Raised when file upload to storage fails."""

    def __init__(self, error: str):
        super().__init__(
            message="Server error",
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
        )
        self.error = error


class StorageDownloadError(PortalException):
    """Raised when reading an object from storage fails."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message="Error serving file",
            code="STORAGE_DOWNLOAD_ERROR",
            status_code=500,
        )
        self.path = path
        self.error = error


class ObjectNotFoundError(PortalException):
    """Raised when a requested object is absent from the bucket."""

    def __init__(self, path: str):
        super().__init__(
            message="File not found",
            code="OBJECT_NOT_FOUND",
            status_code=404,
        )
        self.path = path


# =============================================================================
# Database Exceptions
# =============================================================================

class DatabaseError(PortalException):
    """Raised when a data-store call fails. Detail stays in the logs."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message="Server error",
            code="DATABASE_ERROR",
            status_code=500,
        )
        self.operation = operation
        self.error = error


# =============================================================================
# Exception Handlers
# =============================================================================

async def portal_exception_handler(
    request: Request,
    exc: PortalException
) -> JSONResponse:
    """Convert PortalException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI request validation errors (path/query/form params).

    Reports only the first error, with its location minus the
    "body"/"query"/"path" prefix as the field.
    """
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"message": "Invalid request"})

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path", "form")]
    content: dict[str, Any] = {"message": first.get("msg", "Invalid request")}
    if loc:
        content["field"] = ".".join(loc)
    return JSONResponse(status_code=400, content=content)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Reshape framework HTTP errors (unknown route, bad method) to {message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )
