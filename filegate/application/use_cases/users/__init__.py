"""Use cases for managing users."""

from .authenticate_user import authenticate_user, login
from .create_user import create_user, register_user
from .get_user import get_user_from_token
from .list_users import list_users

__all__ = [
    "authenticate_user",
    "create_user",
    "get_user_from_token",
    "list_users",
    "login",
    "register_user",
]
