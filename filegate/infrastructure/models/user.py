"""SQLAlchemy model for the user table."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from filegate.infrastructure.database import Base
from filegate.utils import utc_now_naive


class UserModel(Base):
    """Database representation of a portal user."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    username = Column(String(6), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)

    subscriptions = relationship(
        "SubscriptionModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SubscriptionModel.created_at",
    )


__all__ = ["UserModel"]
