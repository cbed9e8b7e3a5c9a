"""Use case resolving the user behind a session token."""

from sqlalchemy.orm import Session

from filegate.domain.entities import User
from filegate.domain.exceptions import InvalidTokenError
from filegate.infrastructure.repositories import UserRepository
from filegate.infrastructure.security import decode_access_token


def get_user_from_token(session: Session, token: str) -> User:
    """Validate ``token`` and return the user it was issued to.

    Tokens of deleted users, or whose claims no longer match the stored user,
    are rejected as invalid.
    """

    payload = decode_access_token(token)
    user = UserRepository(session).get(payload["sub"])
    if user is None:
        raise InvalidTokenError()
    if user.username != payload["username"] or user.role.value != payload["role"]:
        raise InvalidTokenError()
    return user
