"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,
    NotFoundError,
    PayloadTooLargeError,
    StorageError,

    # Data service
    InvalidKeyError,
    MissingDataError,
    InvalidJSONError,
    MissingIdError,
    MappingNotFoundError,

    # Logs
    LogNotFoundError,

    # Static files
    StaticFileNotFoundError,
    ForbiddenPathError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",
    "NotFoundError",
    "PayloadTooLargeError",
    "StorageError",

    # Data service
    "InvalidKeyError",
    "MissingDataError",
    "InvalidJSONError",
    "MissingIdError",
    "MappingNotFoundError",

    # Logs
    "LogNotFoundError",

    # Static files
    "StaticFileNotFoundError",
    "ForbiddenPathError",
]
