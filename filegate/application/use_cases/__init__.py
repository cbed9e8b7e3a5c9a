"""Aggregate application use cases."""

from .users import authenticate_user, create_user, login, register_user

__all__ = [
    "authenticate_user",
    "create_user",
    "login",
    "register_user",
]
