"""Repository implementations for infrastructure layer."""

from .category_repository import CategoryRepository
from .file_asset_repository import FileAssetRepository
from .setting_repository import SettingRepository
from .subscription_repository import SubscriptionRepository
from .user_repository import UserRepository

__all__ = [
    "CategoryRepository",
    "FileAssetRepository",
    "SettingRepository",
    "SubscriptionRepository",
    "UserRepository",
]
