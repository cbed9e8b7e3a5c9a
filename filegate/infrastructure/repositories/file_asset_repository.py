"""Persistence helpers for stored files."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from filegate.domain.entities import FileAsset
from filegate.domain.exceptions import CategoryNotFoundError
from filegate.infrastructure.models import CategoryModel, FileAssetModel
from filegate.utils import ensure_utc, ensure_utc_naive, utc_now_naive


class FileAssetRepository:
    """Provide CRUD operations for file metadata."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, file_id: str) -> FileAsset | None:
        model = self.session.get(FileAssetModel, file_id)
        return self.to_entity(model) if model else None

    def create(self, file_asset: FileAsset) -> FileAsset:
        """Insert ``file_asset`` after checking its category in the same transaction."""

        try:
            category = (
                self.session.query(CategoryModel.id)
                .filter(CategoryModel.id == file_asset.category_id)
                .with_for_update()
                .first()
            )
            if category is None:
                raise CategoryNotFoundError()

            model = FileAssetModel()
            self._apply_entity_to_model(model, file_asset)
            self.session.add(model)
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if self.session.get(CategoryModel, file_asset.category_id) is None:
                raise CategoryNotFoundError() from exc
            raise
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self.to_entity(model)

    def delete(self, file_id: str) -> bool:
        try:
            deleted = (
                self.session.query(FileAssetModel)
                .filter(FileAssetModel.id == file_id)
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return bool(deleted)

    @staticmethod
    def to_entity(model: FileAssetModel) -> FileAsset:
        return FileAsset(
            id=model.id,
            stored_name=model.stored_name,
            original_name=model.original_name,
            storage_path=model.storage_path,
            size_bytes=model.size_bytes,
            category_id=model.category_id,
            uploaded_at=ensure_utc(model.uploaded_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: FileAssetModel, file_asset: FileAsset) -> None:
        model.stored_name = file_asset.stored_name
        model.original_name = file_asset.original_name
        model.storage_path = file_asset.storage_path
        model.size_bytes = file_asset.size_bytes
        model.category_id = file_asset.category_id
        model.uploaded_at = ensure_utc_naive(file_asset.uploaded_at) or utc_now_naive()


__all__ = ["FileAssetRepository"]
