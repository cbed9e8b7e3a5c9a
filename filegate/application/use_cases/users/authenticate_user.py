"""Use case for authenticating a user."""

import logging

from sqlalchemy.orm import Session

from filegate.domain.entities import User
from filegate.domain.exceptions import InvalidCredentialsError
from filegate.infrastructure.repositories import UserRepository
from filegate.infrastructure.security import (
    burn_password_check,
    create_access_token,
    verify_password,
)

from .validators import ensure_credentials_present, ensure_valid_username

logger = logging.getLogger(__name__)


def authenticate_user(session: Session, username: str, password: str) -> User:
    """Return the user owning ``username`` when ``password`` matches.

    Unknown usernames and wrong passwords raise the same
    :class:`InvalidCredentialsError` so callers cannot tell them apart.
    """

    ensure_credentials_present(username, password)
    ensure_valid_username(username)

    user = UserRepository(session).get_by_username(username)
    if user is None:
        burn_password_check(password)
        logger.info("Rejected login attempt")
        raise InvalidCredentialsError()

    if not verify_password(password, user.password):
        logger.info("Rejected login attempt")
        raise InvalidCredentialsError()

    logger.info("User %s logged in", user.username)
    return user


def login(session: Session, username: str, password: str) -> tuple[str, User]:
    """Authenticate and return a signed session token with the user."""

    user = authenticate_user(session, username, password)
    return create_access_token(user), user
