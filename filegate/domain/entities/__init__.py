"""Domain entities exposed by the application."""

from .category import Category
from .file_asset import FileAsset
from .role import Role
from .site_settings import SiteSettings
from .subscription import (
    ExpiryTier,
    Subscription,
    SubscriptionType,
    days_remaining,
    expiry_tier,
    is_subscription_active,
)
from .user import PASSWORD_MIN_LENGTH, USERNAME_MAX_LENGTH, User

__all__ = [
    "Category",
    "ExpiryTier",
    "FileAsset",
    "PASSWORD_MIN_LENGTH",
    "Role",
    "SiteSettings",
    "Subscription",
    "SubscriptionType",
    "USERNAME_MAX_LENGTH",
    "User",
    "days_remaining",
    "expiry_tier",
    "is_subscription_active",
]
