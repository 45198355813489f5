"""
Custom exception classes for the application.

Every error maps to an HTTP status and renders as the service envelope
{"success": false, "message": ...}.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "MAPPING_NOT_FOUND")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        content = {
            "success": False,
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            content["details"] = self.details
        return content


class ValidationError(AppError):
    """Bad or missing input (400)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=400,
            details=details
        )


class NotFoundError(AppError):
    """Resource not found (404)."""

    def __init__(
        self,
        resource: str,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code or f"{resource.upper()}_NOT_FOUND",
            message=message or f"{resource} not found",
            status_code=404,
            details=details
        )


class PayloadTooLargeError(AppError):
    """Request body over the configured limit (413)."""

    def __init__(self, limit: int):
        super().__init__(
            code="PAYLOAD_TOO_LARGE",
            message=f"Request body exceeds {limit} bytes",
            status_code=413,
            details={"limit": limit}
        )


class StorageError(AppError):
    """Reading or writing a backing file failed (500)."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="STORAGE_ERROR",
            message=f"Storage {operation} failed: {message}",
            status_code=500,
            details={"operation": operation, **(details or {})}
        )


# ===================
# SPECIFIC ERRORS
# ===================

class InvalidKeyError(ValidationError):
    """Key missing, not a string, or blank."""

    def __init__(self):
        super().__init__(
            code="INVALID_KEY",
            message="Key is required and must be a non-empty string"
        )


class MissingDataError(ValidationError):
    """No data supplied with the key."""

    def __init__(self):
        super().__init__(
            code="MISSING_DATA",
            message="Data is required"
        )


class InvalidJSONError(ValidationError):
    """Data string is not valid JSON text."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            code="INVALID_JSON",
            message="Invalid JSON data provided",
            details={"reason": reason} if reason else None
        )


class MissingIdError(ValidationError):
    """Lookup without an id."""

    def __init__(self):
        super().__init__(
            code="MISSING_ID",
            message="Query parameter 'id' is required"
        )


class MappingNotFoundError(NotFoundError):
    """No mapping stored under the requested key."""

    def __init__(self, key: str):
        super().__init__(
            resource="Mapping",
            message="Data not found. Please check the ID and try again.",
            code="MAPPING_NOT_FOUND"
        )
        self.key = key


class LogNotFoundError(NotFoundError):
    """Access log has not been written yet."""

    def __init__(self):
        super().__init__(
            resource="Log",
            message="Log file not found",
            code="LOG_NOT_FOUND"
        )


class StaticFileNotFoundError(NotFoundError):
    """Requested static file does not exist."""

    def __init__(self, filename: str):
        super().__init__(
            resource="File",
            message="File not found",
            code="FILE_NOT_FOUND"
        )
        self.filename = filename


class ForbiddenPathError(AppError):
    """Static path resolves outside the public directory (403)."""

    def __init__(self):
        super().__init__(
            code="FORBIDDEN",
            message="Forbidden",
            status_code=403
        )
