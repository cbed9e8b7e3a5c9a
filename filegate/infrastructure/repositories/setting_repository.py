"""Persistence helpers for key/value site settings."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy.orm import Session

from filegate.infrastructure.models import SettingModel


class SettingRepository:
    """Read and write branding settings stored as key/value rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_all(self) -> dict[str, str]:
        return {model.key: model.value for model in self.session.query(SettingModel).all()}

    def set_many(self, values: Mapping[str, str], *, overwrite: bool = True) -> None:
        """Store every entry of ``values`` in one transaction."""

        try:
            for key, value in values.items():
                model = self.session.get(SettingModel, key)
                if model is None:
                    self.session.add(SettingModel(key=key, value=value))
                elif overwrite:
                    model.value = value
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise


__all__ = ["SettingRepository"]
