"""Use case for creating users."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from filegate.domain.entities import Role, User
from filegate.domain.exceptions import UsernameTakenError
from filegate.infrastructure.repositories import UserRepository
from filegate.infrastructure.security import get_password_hash
from filegate.utils import utc_now

from .validators import (
    ensure_credentials_present,
    ensure_valid_password,
    ensure_valid_username,
)

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    *,
    username: str,
    password: str,
    role: Role = Role.USER,
) -> User:
    """Create a new user ensuring unique usernames.

    Every validation runs before the store is touched.
    """

    ensure_credentials_present(username, password)
    ensure_valid_username(username)
    ensure_valid_password(password)

    repository = UserRepository(session)
    if repository.get_by_username(username):
        raise UsernameTakenError()

    user = User(
        id=None,
        username=username,
        password=get_password_hash(password),
        role=role,
        created_at=utc_now(),
    )
    try:
        created = repository.create(user)
    except IntegrityError as exc:
        # Lost a race against a concurrent registration of the same name.
        raise UsernameTakenError() from exc

    logger.info("Created %s account %s", created.role.value, created.username)
    return created


def register_user(session: Session, *, username: str, password: str) -> User:
    """Self-service registration; always creates a regular user."""

    return create_user(session, username=username, password=password, role=Role.USER)
