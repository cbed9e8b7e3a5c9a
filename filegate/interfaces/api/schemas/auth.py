"""Authentication related schemas."""

from .common import ApiResponse, CamelModel
from .user import UserRead


class Credentials(CamelModel):
    # Optional so missing values get the domain message instead of a schema error.
    username: str | None = None
    password: str | None = None


class LoginResponse(ApiResponse):
    token: str
    user: UserRead


class UserResponse(ApiResponse):
    user: UserRead


__all__ = ["Credentials", "LoginResponse", "UserResponse"]
