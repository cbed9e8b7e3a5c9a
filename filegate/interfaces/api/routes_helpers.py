"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from filegate.domain.exceptions import (
    ConflictError,
    FileGateError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    StorageFailureError,
    UnauthorizedError,
)

_STATUS_BY_ERROR: tuple[tuple[type[FileGateError], int], ...] = (
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (StorageFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_code_for(exc: FileGateError) -> int:
    """Return the HTTP status that represents ``exc``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(exc: FileGateError) -> HTTPException:
    """Translate a use case error into the response sent to the client."""

    status_code = status_code_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(status_code=status_code, detail=exc.message, headers=headers)
