"""Use case for listing users."""

from sqlalchemy.orm import Session

from filegate.domain.entities import Subscription, User
from filegate.infrastructure.repositories import SubscriptionRepository, UserRepository


def list_users(session: Session) -> list[tuple[User, Subscription | None]]:
    """Return every user, newest first, paired with its active grant."""

    users = list(UserRepository(session).list())
    active = SubscriptionRepository(session).get_active_map(
        [user.id for user in users if user.id is not None]
    )
    return [(user, active.get(user.id)) for user in users]
