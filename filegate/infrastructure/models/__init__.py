"""ORM models used by the application infrastructure."""

from .category import CategoryModel
from .file_asset import FileAssetModel
from .setting import SettingModel
from .subscription import SubscriptionModel
from .user import UserModel

__all__ = [
    "CategoryModel",
    "FileAssetModel",
    "SettingModel",
    "SubscriptionModel",
    "UserModel",
]
