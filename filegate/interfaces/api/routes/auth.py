"""Endpoints for registration, login and token verification."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from filegate.application.use_cases.subscriptions import get_active_subscription
from filegate.application.use_cases.users import login as login_uc
from filegate.application.use_cases.users import register_user as register_user_uc
from filegate.domain.entities import User
from filegate.domain.exceptions import FileGateError
from filegate.infrastructure.database import get_db
from filegate.interfaces.api.dependencies import get_current_user
from filegate.interfaces.api.routes_helpers import to_http_exception
from filegate.interfaces.api.schemas import (
    Credentials,
    LoginResponse,
    UserRead,
    UserResponse,
)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: Credentials, db: Session = Depends(get_db)) -> UserResponse:
    """Create a regular account. Subscriptions are granted by an administrator."""

    try:
        user = register_user_uc(db, username=payload.username, password=payload.password)
    except FileGateError as exc:
        raise to_http_exception(exc) from exc
    return UserResponse(message="Registration successful", user=UserRead.from_entity(user))


@router.post("/login", response_model=LoginResponse)
def login(payload: Credentials, db: Session = Depends(get_db)) -> LoginResponse:
    """Exchange credentials for a bearer token."""

    try:
        token, user = login_uc(db, payload.username, payload.password)
    except FileGateError as exc:
        raise to_http_exception(exc) from exc

    subscription = get_active_subscription(db, user.id)
    return LoginResponse(token=token, user=UserRead.from_entity(user, subscription))


@router.post("/verify-token", response_model=UserResponse)
def verify_token(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserResponse:
    """Return the token owner with its current subscription state."""

    subscription = get_active_subscription(db, current_user.id)
    return UserResponse(user=UserRead.from_entity(current_user, subscription))


__all__ = ["router"]
