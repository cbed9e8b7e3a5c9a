"""SQLAlchemy model for subscription grants."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, text
from sqlalchemy.orm import relationship

from filegate.infrastructure.database import Base
from filegate.utils import utc_now_naive


class SubscriptionModel(Base):
    """Database representation of a time-boxed access grant."""

    __tablename__ = "subscriptions"
    __table_args__ = (
        # At most one active grant per user. Backends without partial indexes skip it.
        Index(
            "uq_subscriptions_active_user",
            "user_id",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ).ddl_if(dialect=("sqlite", "postgresql")),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type = Column(String(20), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)

    user = relationship("UserModel", back_populates="subscriptions")


__all__ = ["SubscriptionModel"]
