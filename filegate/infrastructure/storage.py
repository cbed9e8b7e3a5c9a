"""Local disk storage for uploaded file bytes."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from filegate.config import get_settings
from filegate.domain.exceptions import FileTooLargeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class LocalFileStorage:
    """Store objects as plain files below ``root``.

    Objects are addressed by a relative ``storage_path``. Paths that would
    resolve outside ``root`` are rejected so catalog rows can never point the
    dispenser at arbitrary files.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).resolve()

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def resolve(self, storage_path: str) -> Path:
        """Return the absolute path of ``storage_path`` inside the storage root."""

        candidate = (self.root / storage_path).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            raise ValueError(f"Storage path escapes the storage root: {storage_path}")
        return candidate

    def exists(self, storage_path: str) -> bool:
        try:
            return self.resolve(storage_path).is_file()
        except ValueError:
            return False

    def open_writer(self, storage_path: str, *, max_bytes: int | None = None) -> StorageWriter:
        """Create a new object at ``storage_path`` and return a handle to fill it.

        Existing objects are never overwritten.
        """

        destination = self.resolve(storage_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        return StorageWriter(destination, max_bytes=max_bytes)

    def delete(self, storage_path: str) -> bool:
        """Delete the object at ``storage_path``. Returns ``False`` when it was missing."""

        path = self.resolve(storage_path)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True


class StorageWriter:
    """Append-only handle on an object being written.

    Raises :class:`FileTooLargeError` once more than ``max_bytes`` were written.
    Callers remove the partial object with :meth:`discard` when a write fails.
    """

    def __init__(self, path: Path, *, max_bytes: int | None = None) -> None:
        self.path = path
        self.max_bytes = max_bytes
        self.written = 0
        self._file = path.open("xb")

    def write(self, chunk: bytes) -> None:
        self.written += len(chunk)
        if self.max_bytes is not None and self.written > self.max_bytes:
            raise FileTooLargeError()
        self._file.write(chunk)

    def close(self) -> None:
        self._file.close()

    def discard(self) -> None:
        self._file.close()
        _remove_quietly(self.path)


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError:
        logger.warning("Could not remove partial upload %s", path, exc_info=True)


@lru_cache
def get_file_storage() -> LocalFileStorage:
    """Return the storage configured by ``UPLOAD_DIR``."""

    storage = LocalFileStorage(get_settings().upload_dir)
    storage.ensure_root()
    return storage


__all__ = ["CHUNK_SIZE", "LocalFileStorage", "StorageWriter", "get_file_storage"]
