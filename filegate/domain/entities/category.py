"""Domain entity describing a category of downloadable files."""

from dataclasses import dataclass, field
from datetime import datetime

from .file_asset import FileAsset


@dataclass
class Category:
    """A named group of files shown together in the catalog."""

    id: str | None
    name: str
    created_at: datetime | None
    files: list[FileAsset] = field(default_factory=list)


__all__ = ["Category"]
