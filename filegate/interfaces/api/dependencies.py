"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from filegate.application.use_cases.users import get_user_from_token
from filegate.config import Settings, get_settings
from filegate.domain.entities import Role, User
from filegate.domain.exceptions import UnauthorizedError
from filegate.infrastructure.database import get_db
from filegate.infrastructure.storage import LocalFileStorage, get_file_storage

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings() -> Settings:
    return get_settings()


def get_storage() -> LocalFileStorage:
    return get_file_storage()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the user the bearer token was issued to."""

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return get_user_from_token(db, credentials.credentials)
    except UnauthorizedError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    match current_user.role:
        case Role.ADMIN:
            return current_user
        case Role.USER:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin access required",
            )
