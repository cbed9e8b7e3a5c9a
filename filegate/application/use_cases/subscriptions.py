"""Use cases for the subscription ledger."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from filegate.domain.entities import Subscription, SubscriptionType, is_subscription_active
from filegate.domain.exceptions import InvalidInputError, UserNotFoundError
from filegate.infrastructure.repositories import SubscriptionRepository
from filegate.utils import utc_now

logger = logging.getLogger(__name__)


def parse_subscription_type(value: str | SubscriptionType | None) -> SubscriptionType:
    """Return the plan named by ``value`` or raise ``InvalidInputError``."""

    if isinstance(value, SubscriptionType):
        return value
    try:
        return SubscriptionType(value)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in SubscriptionType)
        raise InvalidInputError(f"Subscription type must be one of: {allowed}") from exc


def parse_subscription_days(value: object) -> int:
    """Return ``value`` as a positive number of days or raise ``InvalidInputError``."""

    # bool is an int subclass but never a valid duration.
    if isinstance(value, bool):
        raise InvalidInputError("Days must be a positive integer")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int) or value <= 0:
        raise InvalidInputError("Days must be a positive integer")
    return value


def grant_subscription(
    session: Session,
    *,
    user_id: str,
    type: str | SubscriptionType | None,
    days: object,
    now: datetime | None = None,
) -> Subscription:
    """Make a new grant the only active subscription of ``user_id``.

    Earlier grants are deactivated, never deleted. Inputs are validated before
    anything is written and both writes share one transaction.
    """

    if type is None or days is None:
        raise InvalidInputError("Type and days required")
    plan = parse_subscription_type(type)
    duration = parse_subscription_days(days)

    granted_at = now or utc_now()
    subscription = Subscription(
        id=None,
        user_id=user_id,
        type=plan,
        expires_at=granted_at + timedelta(days=duration),
        is_active=True,
        created_at=granted_at,
    )
    saved = SubscriptionRepository(session).supersede(subscription)
    if saved is None:
        raise UserNotFoundError()

    logger.info(
        "Granted %s subscription to user %s until %s",
        saved.type.value,
        user_id,
        saved.expires_at.isoformat(),
    )
    return saved


def get_active_subscription(session: Session, user_id: str) -> Subscription | None:
    """Return the grant flagged active for ``user_id``, expired or not."""

    return SubscriptionRepository(session).get_active(user_id)


def has_active_subscription(
    session: Session, user_id: str, *, now: datetime | None = None
) -> bool:
    """Return whether ``user_id`` may download right now."""

    grant = get_active_subscription(session, user_id)
    return is_subscription_active(grant, now or utc_now())


__all__ = [
    "get_active_subscription",
    "grant_subscription",
    "has_active_subscription",
    "parse_subscription_days",
    "parse_subscription_type",
]
