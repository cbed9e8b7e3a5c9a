"""SQLAlchemy model for key/value site settings."""

from sqlalchemy import Column, String, Text

from filegate.infrastructure.database import Base


class SettingModel(Base):
    """A single branding setting."""

    __tablename__ = "settings"

    key = Column(String(50), primary_key=True)
    value = Column(Text, nullable=False, default="")


__all__ = ["SettingModel"]
