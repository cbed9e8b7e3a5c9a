"""Domain entity describing a stored downloadable file."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class FileAsset:
    """Catalog metadata for a file whose bytes live in storage.

    ``original_name`` is supplied by the uploader and is only used for display
    and as the suggested download name. Storage is addressed by ``stored_name``.
    """

    id: str | None
    stored_name: str
    original_name: str
    storage_path: str
    size_bytes: int
    category_id: str
    uploaded_at: datetime | None


__all__ = ["FileAsset"]
