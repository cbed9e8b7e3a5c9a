"""Download dispenser: turns an authorized request into a file on disk."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from sqlalchemy.orm import Session

from filegate.application.use_cases.subscriptions import has_active_subscription
from filegate.domain.entities import User
from filegate.domain.exceptions import (
    FileAssetNotFoundError,
    NoActiveSubscriptionError,
    StorageMissingError,
)
from filegate.infrastructure.repositories import FileAssetRepository
from filegate.infrastructure.storage import LocalFileStorage


def resolve_download(
    session: Session,
    storage: LocalFileStorage,
    *,
    file_id: str,
    requester: User,
    now: datetime | None = None,
) -> tuple[Path, str]:
    """Return the stored path and suggested filename of ``file_id``.

    The subscription is checked before the catalog or storage are consulted.
    """

    if not has_active_subscription(session, requester.id, now=now):
        raise NoActiveSubscriptionError()

    file_asset = FileAssetRepository(session).get(file_id)
    if file_asset is None:
        raise FileAssetNotFoundError()

    if not storage.exists(file_asset.storage_path):
        raise StorageMissingError()

    return storage.resolve(file_asset.storage_path), file_asset.original_name


__all__ = ["resolve_download"]
