"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import Role

USERNAME_MAX_LENGTH = 6
PASSWORD_MIN_LENGTH = 6


@dataclass
class User:
    """Core attributes describing an application user."""

    id: str | None
    username: str
    password: str
    role: Role
    created_at: datetime | None

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        match self.role:
            case Role.ADMIN:
                return True
            case Role.USER:
                return False


__all__ = ["PASSWORD_MIN_LENGTH", "USERNAME_MAX_LENGTH", "User"]
