"""User schemas."""

from __future__ import annotations

from datetime import datetime

from filegate.domain.entities import (
    ExpiryTier,
    Role,
    Subscription,
    SubscriptionType,
    User,
    days_remaining,
    expiry_tier,
    is_subscription_active,
)
from filegate.utils import utc_now

from .common import ApiResponse, CamelModel


class SubscriptionRead(CamelModel):
    id: str
    type: SubscriptionType
    expires_at: datetime
    is_active: bool
    days_remaining: int
    status: ExpiryTier

    @classmethod
    def from_entity(
        cls, subscription: Subscription, now: datetime | None = None
    ) -> "SubscriptionRead":
        """Evaluate ``subscription`` at ``now`` for display."""

        now = now or utc_now()
        return cls(
            id=subscription.id,
            type=subscription.type,
            expires_at=subscription.expires_at,
            is_active=is_subscription_active(subscription, now),
            days_remaining=max(days_remaining(subscription, now), 0),
            status=expiry_tier(subscription, now),
        )


class UserRead(CamelModel):
    id: str
    username: str
    role: Role
    created_at: datetime | None
    subscription: SubscriptionRead | None = None

    @classmethod
    def from_entity(
        cls, user: User, subscription: Subscription | None = None
    ) -> "UserRead":
        return cls(
            id=user.id,
            username=user.username,
            role=user.role,
            created_at=user.created_at,
            subscription=SubscriptionRead.from_entity(subscription) if subscription else None,
        )


class UserListResponse(ApiResponse):
    users: list[UserRead]


class SubscriptionGrantRequest(CamelModel):
    type: str | None = None
    days: int | None = None


class SubscriptionGrantResponse(ApiResponse):
    subscription: SubscriptionRead


__all__ = [
    "SubscriptionGrantRequest",
    "SubscriptionGrantResponse",
    "SubscriptionRead",
    "UserListResponse",
    "UserRead",
]
