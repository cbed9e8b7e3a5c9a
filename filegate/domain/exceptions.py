"""Errors raised by use cases.

Every class carries the English message returned to API clients. The builtin
base classes let callers that only know about ``ValueError`` or
``PermissionError`` keep handling them.
"""

from __future__ import annotations


class FileGateError(Exception):
    """Base class for every expected application failure."""

    default_message = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidInputError(FileGateError, ValueError):
    default_message = "Invalid input"


class MissingCategoryError(InvalidInputError):
    default_message = "Category ID required"


class UnsupportedFileTypeError(InvalidInputError):
    default_message = "Invalid file type"


class FileTooLargeError(InvalidInputError):
    default_message = "File too large"


class EmptyCategoryNameError(InvalidInputError):
    default_message = "Category name required"


class UnauthorizedError(FileGateError):
    default_message = "Unauthorized"


class InvalidCredentialsError(UnauthorizedError):
    default_message = "Invalid credentials"


class InvalidTokenError(UnauthorizedError):
    default_message = "Invalid token"


class TokenExpiredError(InvalidTokenError):
    default_message = "Token expired"


class ForbiddenError(FileGateError, PermissionError):
    default_message = "Forbidden"


class NoActiveSubscriptionError(ForbiddenError):
    default_message = "Active subscription required"


class NotFoundError(FileGateError, LookupError):
    default_message = "Not found"


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


class CategoryNotFoundError(NotFoundError):
    default_message = "Category not found"


class FileAssetNotFoundError(NotFoundError):
    default_message = "File not found"


class StorageMissingError(NotFoundError):
    default_message = "File not found on disk"


class ConflictError(FileGateError):
    default_message = "Conflict"


class UsernameTakenError(ConflictError):
    default_message = "Username already exists"


class StorageFailureError(FileGateError):
    default_message = "Storage failure"


class StorageWriteFailedError(StorageFailureError):
    default_message = "Failed to store the uploaded file"


__all__ = [
    "CategoryNotFoundError",
    "ConflictError",
    "EmptyCategoryNameError",
    "FileAssetNotFoundError",
    "FileGateError",
    "FileTooLargeError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidInputError",
    "InvalidTokenError",
    "MissingCategoryError",
    "NoActiveSubscriptionError",
    "NotFoundError",
    "StorageFailureError",
    "StorageMissingError",
    "StorageWriteFailedError",
    "TokenExpiredError",
    "UnauthorizedError",
    "UnsupportedFileTypeError",
    "UserNotFoundError",
    "UsernameTakenError",
]
