"""Use cases for the category and file catalog."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from filegate.domain.entities import Category, FileAsset
from filegate.domain.exceptions import EmptyCategoryNameError, FileAssetNotFoundError
from filegate.infrastructure.repositories import CategoryRepository, FileAssetRepository
from filegate.infrastructure.storage import LocalFileStorage
from filegate.utils import utc_now

logger = logging.getLogger(__name__)


def create_category(session: Session, name: str | None) -> Category:
    """Create a category named ``name`` after trimming it.

    Duplicate names are accepted.
    """

    normalized = (name or "").strip()
    if not normalized:
        raise EmptyCategoryNameError()

    category = CategoryRepository(session).create(
        Category(id=None, name=normalized, created_at=utc_now())
    )
    logger.info("Created category %s (%s)", category.name, category.id)
    return category


def list_categories(session: Session) -> list[Category]:
    """Return every category by name, each with its files newest first."""

    return list(CategoryRepository(session).list_with_files())


def record_file(
    session: Session,
    *,
    stored_name: str,
    original_name: str,
    storage_path: str,
    size_bytes: int,
    category_id: str,
) -> FileAsset:
    """Insert catalog metadata for bytes that are already in storage."""

    return FileAssetRepository(session).create(
        FileAsset(
            id=None,
            stored_name=stored_name,
            original_name=original_name,
            storage_path=storage_path,
            size_bytes=size_bytes,
            category_id=category_id,
            uploaded_at=utc_now(),
        )
    )


def delete_file(session: Session, storage: LocalFileStorage, file_id: str) -> None:
    """Remove a file from storage and from the catalog.

    The catalog row is removed even when the stored object is already gone or
    cannot be removed; a removed object is not restored if the row deletion
    fails.
    """

    repository = FileAssetRepository(session)
    file_asset = repository.get(file_id)
    if file_asset is None:
        raise FileAssetNotFoundError()

    try:
        removed = storage.delete(file_asset.storage_path)
    except (OSError, ValueError):
        logger.warning(
            "Could not remove stored object %s of file %s",
            file_asset.storage_path,
            file_id,
            exc_info=True,
        )
    else:
        if not removed:
            logger.warning(
                "Stored object %s of file %s was already missing",
                file_asset.storage_path,
                file_id,
            )

    repository.delete(file_id)
    logger.info("Deleted file %s (%s)", file_asset.original_name, file_id)


__all__ = ["create_category", "delete_file", "list_categories", "record_file"]
