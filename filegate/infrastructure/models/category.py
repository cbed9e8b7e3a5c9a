"""SQLAlchemy model for file categories."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from filegate.infrastructure.database import Base
from filegate.utils import utc_now_naive


class CategoryModel(Base):
    """Database representation of a catalog category."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)

    files = relationship(
        "FileAssetModel",
        back_populates="category",
        order_by="FileAssetModel.uploaded_at.desc()",
    )


__all__ = ["CategoryModel"]
