"""SQLAlchemy model for stored downloadable files."""

from uuid import uuid4

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from filegate.infrastructure.database import Base
from filegate.utils import utc_now_naive


class FileAssetModel(Base):
    """Database representation of an uploaded file."""

    __tablename__ = "files"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    stored_name = Column(String(255), nullable=False, unique=True)
    original_name = Column(String(255), nullable=False)
    storage_path = Column(String(512), nullable=False)
    size_bytes = Column(BigInteger, nullable=False)
    category_id = Column(
        String(36), ForeignKey("categories.id"), nullable=False, index=True
    )
    uploaded_at = Column(DateTime, nullable=False, default=utc_now_naive)

    category = relationship("CategoryModel", back_populates="files")


__all__ = ["FileAssetModel"]
