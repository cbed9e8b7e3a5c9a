"""Persistence helpers for catalog categories."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session, selectinload

from filegate.domain.entities import Category
from filegate.infrastructure.models import CategoryModel
from filegate.infrastructure.repositories.file_asset_repository import FileAssetRepository
from filegate.utils import ensure_utc, ensure_utc_naive, utc_now_naive


class CategoryRepository:
    """Provide create and read operations for categories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_with_files(self) -> Sequence[Category]:
        query = (
            self.session.query(CategoryModel)
            .options(selectinload(CategoryModel.files))
            .order_by(CategoryModel.name.asc(), CategoryModel.created_at.asc())
        )
        return [self._to_entity(model, include_files=True) for model in query.all()]

    def get(self, category_id: str) -> Category | None:
        model = self.session.get(CategoryModel, category_id)
        return self._to_entity(model) if model else None

    def count(self) -> int:
        return self.session.query(CategoryModel).count()

    def create(self, category: Category) -> Category:
        model = CategoryModel()
        model.name = category.name
        model.created_at = ensure_utc_naive(category.created_at) or utc_now_naive()
        self.session.add(model)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CategoryModel, *, include_files: bool = False) -> Category:
        files = []
        if include_files:
            files = [FileAssetRepository.to_entity(item) for item in model.files]
        return Category(
            id=model.id,
            name=model.name,
            created_at=ensure_utc(model.created_at),
            files=files,
        )


__all__ = ["CategoryRepository"]
