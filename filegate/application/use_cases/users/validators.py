"""Common validation helpers for user use cases."""

from filegate.domain.entities import PASSWORD_MIN_LENGTH, USERNAME_MAX_LENGTH
from filegate.domain.exceptions import InvalidInputError


def ensure_credentials_present(username: str | None, password: str | None) -> None:
    """Raise ``InvalidInputError`` unless both credentials were supplied."""

    if not username or not password:
        raise InvalidInputError("Username and password required")


def ensure_valid_username(username: str) -> str:
    """Return ``username`` unchanged or raise ``InvalidInputError``.

    Usernames are case sensitive and are not trimmed.
    """

    if len(username) > USERNAME_MAX_LENGTH:
        raise InvalidInputError(
            f"Username must be {USERNAME_MAX_LENGTH} characters or less"
        )
    return username


def ensure_valid_password(password: str) -> str:
    if len(password) < PASSWORD_MIN_LENGTH:
        raise InvalidInputError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        )
    return password
