"""Persistence helpers for subscription grants."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import update
from sqlalchemy.orm import Session

from filegate.domain.entities import Subscription, SubscriptionType
from filegate.infrastructure.models import SubscriptionModel, UserModel
from filegate.utils import ensure_utc, ensure_utc_naive, utc_now_naive


class SubscriptionRepository:
    """Provide ledger operations for subscription grants."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_active(self, user_id: str) -> Subscription | None:
        model = (
            self.session.query(SubscriptionModel)
            .filter(
                SubscriptionModel.user_id == user_id,
                SubscriptionModel.is_active.is_(True),
            )
            .order_by(SubscriptionModel.created_at.desc())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_active_map(self, user_ids: Sequence[str]) -> dict[str, Subscription]:
        if not user_ids:
            return {}
        query = (
            self.session.query(SubscriptionModel)
            .filter(
                SubscriptionModel.user_id.in_(set(user_ids)),
                SubscriptionModel.is_active.is_(True),
            )
            .order_by(SubscriptionModel.created_at.asc())
        )
        # Later rows win so the most recent grant is kept for each user.
        return {model.user_id: self._to_entity(model) for model in query.all()}

    def list_by_user(self, user_id: str) -> Sequence[Subscription]:
        query = (
            self.session.query(SubscriptionModel)
            .filter(SubscriptionModel.user_id == user_id)
            .order_by(SubscriptionModel.created_at.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def supersede(self, subscription: Subscription) -> Subscription | None:
        """Deactivate every grant of the user and insert ``subscription`` as active.

        Both writes are committed together. Returns ``None`` when the user does
        not exist, in which case nothing is written.
        """

        try:
            # Serializes concurrent grants for the same user on backends with
            # row locks; SQLite serializes writers at the database level.
            owner = (
                self.session.query(UserModel.id)
                .filter(UserModel.id == subscription.user_id)
                .with_for_update()
                .first()
            )
            if owner is None:
                self.session.rollback()
                return None

            self.session.execute(
                update(SubscriptionModel)
                .where(
                    SubscriptionModel.user_id == subscription.user_id,
                    SubscriptionModel.is_active.is_(True),
                )
                .values(is_active=False)
                .execution_options(synchronize_session=False)
            )
            self.session.flush()

            model = SubscriptionModel()
            self._apply_entity_to_model(model, subscription)
            model.is_active = True
            self.session.add(model)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: SubscriptionModel) -> Subscription:
        return Subscription(
            id=model.id,
            user_id=model.user_id,
            type=SubscriptionType(model.type),
            expires_at=ensure_utc(model.expires_at),
            is_active=bool(model.is_active),
            created_at=ensure_utc(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: SubscriptionModel, subscription: Subscription) -> None:
        model.user_id = subscription.user_id
        model.type = subscription.type.value
        model.expires_at = ensure_utc_naive(subscription.expires_at)
        model.is_active = subscription.is_active
        model.created_at = ensure_utc_naive(subscription.created_at) or utc_now_naive()


__all__ = ["SubscriptionRepository"]
