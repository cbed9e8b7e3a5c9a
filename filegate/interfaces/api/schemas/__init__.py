from .auth import Credentials, LoginResponse, UserResponse
from .catalog import (
    CategoryCreate,
    CategoryCreateResponse,
    CategoryListResponse,
    CategoryRead,
    FileRead,
    FileUploadResponse,
)
from .common import ApiResponse, CamelModel
from .site_settings import SiteSettingsRead, SiteSettingsResponse, SiteSettingsUpdate
from .user import (
    SubscriptionGrantRequest,
    SubscriptionGrantResponse,
    SubscriptionRead,
    UserListResponse,
    UserRead,
)

__all__ = [
    "ApiResponse",
    "CamelModel",
    "CategoryCreate",
    "CategoryCreateResponse",
    "CategoryListResponse",
    "CategoryRead",
    "Credentials",
    "FileRead",
    "FileUploadResponse",
    "LoginResponse",
    "SiteSettingsRead",
    "SiteSettingsResponse",
    "SiteSettingsUpdate",
    "SubscriptionGrantRequest",
    "SubscriptionGrantResponse",
    "SubscriptionRead",
    "UserListResponse",
    "UserRead",
    "UserResponse",
]
