from datetime import datetime, timedelta, timezone

import pytest

from filegate.domain.entities import (
    ExpiryTier,
    Subscription,
    SubscriptionType,
    days_remaining,
    expiry_tier,
    is_subscription_active,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _grant(expires_in: timedelta, *, is_active: bool = True) -> Subscription:
    return Subscription(
        id="grant-1",
        user_id="user-1",
        type=SubscriptionType.THIRTY_DAYS,
        expires_at=NOW + expires_in,
        is_active=is_active,
        created_at=NOW,
    )


def test_missing_grant_is_inactive():
    assert is_subscription_active(None, NOW) is False
    assert expiry_tier(None, NOW) is ExpiryTier.CRITICAL


def test_active_requires_flag_and_future_expiry():
    assert is_subscription_active(_grant(timedelta(days=1)), NOW) is True
    assert is_subscription_active(_grant(timedelta(days=1), is_active=False), NOW) is False
    assert is_subscription_active(_grant(timedelta(0)), NOW) is False
    assert is_subscription_active(_grant(timedelta(seconds=-1)), NOW) is False


def test_activity_never_returns_after_expiry():
    grant = _grant(timedelta(hours=5))
    observed = [
        is_subscription_active(grant, NOW + timedelta(hours=offset)) for offset in range(0, 12)
    ]
    assert observed == sorted(observed, reverse=True)
    assert observed[4] is True
    assert observed[5] is False


def test_naive_reference_time_is_treated_as_utc():
    grant = _grant(timedelta(minutes=1))
    assert is_subscription_active(grant, NOW.replace(tzinfo=None)) is True


@pytest.mark.parametrize(
    ("expires_in", "expected"),
    [
        (timedelta(days=30), 30),
        (timedelta(days=29, hours=1), 30),
        (timedelta(hours=1), 1),
        (timedelta(days=-2), -2),
    ],
)
def test_days_remaining_rounds_up(expires_in, expected):
    assert days_remaining(_grant(expires_in), NOW) == expected


@pytest.mark.parametrize(
    ("expires_in", "tier"),
    [
        (timedelta(days=8), ExpiryTier.HEALTHY),
        (timedelta(days=7), ExpiryTier.WARNING),
        (timedelta(days=4), ExpiryTier.WARNING),
        (timedelta(days=3), ExpiryTier.CRITICAL),
        (timedelta(hours=2), ExpiryTier.CRITICAL),
    ],
)
def test_expiry_tier_thresholds(expires_in, tier):
    assert expiry_tier(_grant(expires_in), NOW) is tier


def test_deactivated_grant_is_critical_even_with_time_left():
    assert expiry_tier(_grant(timedelta(days=100), is_active=False), NOW) is ExpiryTier.CRITICAL
