"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from filegate.domain.entities import Role, User
from filegate.infrastructure.models import UserModel
from filegate.utils import ensure_utc, ensure_utc_naive, utc_now_naive


class UserRepository:
    """Provide read and create operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(UserModel.created_at.desc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.username == username)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            password=model.password,
            role=Role(model.role),
            created_at=ensure_utc(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        if user.id is not None:
            model.id = user.id
        model.username = user.username
        model.password = user.password
        model.role = user.role.value
        model.created_at = ensure_utc_naive(user.created_at) or utc_now_naive()


__all__ = ["UserRepository"]
