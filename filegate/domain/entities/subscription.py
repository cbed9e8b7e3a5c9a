"""Domain entity describing a time-boxed subscription grant."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from filegate.utils import ensure_utc

_SECONDS_PER_DAY = 24 * 60 * 60


class SubscriptionType(str, Enum):
    """Subscription plans an administrator can grant."""

    SEVEN_DAYS = "7days"
    THIRTY_DAYS = "30days"
    SIXTY_DAYS = "60days"
    ONE_YEAR = "365days"


class ExpiryTier(str, Enum):
    """Display tier of a subscription based on the days it has left."""

    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass
class Subscription:
    """A grant of download access for one user until ``expires_at``."""

    id: str | None
    user_id: str
    type: SubscriptionType
    expires_at: datetime
    is_active: bool
    created_at: datetime | None


def is_subscription_active(grant: Subscription | None, now: datetime) -> bool:
    """Return whether ``grant`` is flagged active and not yet expired at ``now``."""

    if grant is None or not grant.is_active:
        return False
    return ensure_utc(grant.expires_at) > ensure_utc(now)


def days_remaining(grant: Subscription, now: datetime) -> int:
    """Return the whole days left before ``grant`` expires, rounded up.

    Expired grants yield zero or a negative number.
    """

    delta = ensure_utc(grant.expires_at) - ensure_utc(now)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def expiry_tier(grant: Subscription | None, now: datetime) -> ExpiryTier:
    """Classify ``grant`` for display. Never used for authorization."""

    if not is_subscription_active(grant, now):
        return ExpiryTier.CRITICAL
    remaining = days_remaining(grant, now)
    if remaining > 7:
        return ExpiryTier.HEALTHY
    if remaining > 3:
        return ExpiryTier.WARNING
    return ExpiryTier.CRITICAL


__all__ = [
    "ExpiryTier",
    "Subscription",
    "SubscriptionType",
    "days_remaining",
    "expiry_tier",
    "is_subscription_active",
]
