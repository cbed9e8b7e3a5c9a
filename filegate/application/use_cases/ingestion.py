"""File ingestion pipeline: validated bytes in storage plus a catalog row."""

from __future__ import annotations

import logging
from collections.abc import Collection
from pathlib import PurePath
from typing import BinaryIO

from sqlalchemy.orm import Session

from filegate.application.use_cases.catalog import record_file
from filegate.domain.entities import FileAsset
from filegate.domain.exceptions import (
    FileTooLargeError,
    MissingCategoryError,
    StorageWriteFailedError,
    UnsupportedFileTypeError,
)
from filegate.infrastructure.storage import CHUNK_SIZE, LocalFileStorage
from filegate.utils import file_extension, format_file_size, generate_stored_name

logger = logging.getLogger(__name__)


def unsupported_type_message(allowed_extensions: Collection[str]) -> str:
    listed = ", ".join(allowed_extensions)
    return f"Invalid file type. Only {listed} files are allowed."


def too_large_message(max_bytes: int) -> str:
    return f"File too large. Maximum size is {format_file_size(max_bytes).replace(' ', '')}."


def ensure_category_given(category_id: str | None) -> str:
    if not category_id:
        raise MissingCategoryError()
    return category_id


def ensure_allowed_type(original_filename: str | None, allowed_extensions: Collection[str]) -> str:
    """Return the extension of ``original_filename`` when it is allowed."""

    extension = file_extension(original_filename or "")
    if extension.lower() not in {item.lower() for item in allowed_extensions}:
        raise UnsupportedFileTypeError(unsupported_type_message(allowed_extensions))
    return extension


def ensure_within_limit(declared_size: int | None, max_bytes: int) -> None:
    if declared_size is not None and declared_size > max_bytes:
        raise FileTooLargeError(too_large_message(max_bytes))


def validate_upload(
    *,
    original_filename: str | None,
    declared_size: int | None,
    category_id: str | None,
    allowed_extensions: Collection[str],
    max_bytes: int,
) -> str:
    """Run the cheap checks of the pipeline in order and return the file extension."""

    ensure_category_given(category_id)
    extension = ensure_allowed_type(original_filename, allowed_extensions)
    ensure_within_limit(declared_size, max_bytes)
    return extension


class PendingUpload:
    """Bytes of one upload being written to storage under a generated name.

    The original filename is kept for display only. Any failure removes the
    partially written object before the error propagates.
    """

    def __init__(self, storage: LocalFileStorage, original_filename: str, *, max_bytes: int) -> None:
        self.display_name = PurePath(original_filename.replace("\\", "/")).name
        self.stored_name = generate_stored_name(self.display_name)
        self.max_bytes = max_bytes
        self._storage = storage
        try:
            self._writer = storage.open_writer(self.stored_name, max_bytes=max_bytes)
        except OSError as exc:
            logger.exception("Failed to create storage object %s", self.stored_name)
            raise StorageWriteFailedError() from exc

    @property
    def size_bytes(self) -> int:
        return self._writer.written

    def write(self, chunk: bytes) -> None:
        try:
            self._writer.write(chunk)
        except FileTooLargeError as exc:
            self.discard()
            raise FileTooLargeError(too_large_message(self.max_bytes)) from exc
        except OSError as exc:
            logger.exception("Failed to store upload %s as %s", self.display_name, self.stored_name)
            self.discard()
            raise StorageWriteFailedError() from exc

    def close(self) -> None:
        try:
            self._writer.close()
        except OSError as exc:
            logger.exception("Failed to store upload %s as %s", self.display_name, self.stored_name)
            self.discard()
            raise StorageWriteFailedError() from exc

    def discard(self) -> None:
        self._writer.discard()

    def complete(self, session: Session, category_id: str | None) -> FileAsset:
        """Record the stored bytes in ``category_id``.

        When the catalog insert fails the stored object is removed before the
        error propagates.
        """

        try:
            ensure_category_given(category_id)
        except MissingCategoryError:
            self.discard()
            raise

        try:
            file_asset = record_file(
                session,
                stored_name=self.stored_name,
                original_name=self.display_name,
                storage_path=self.stored_name,
                size_bytes=self.size_bytes,
                category_id=category_id,
            )
        except Exception:
            logger.warning(
                "Catalog insert failed for %s; removing stored object %s",
                self.display_name,
                self.stored_name,
            )
            try:
                self._storage.delete(self.stored_name)
            except OSError:
                logger.exception("Could not remove orphaned object %s", self.stored_name)
            raise

        logger.info(
            "Stored %s as %s (%d bytes) in category %s",
            file_asset.original_name,
            file_asset.stored_name,
            file_asset.size_bytes,
            file_asset.category_id,
        )
        return file_asset


def ingest_file(
    session: Session,
    storage: LocalFileStorage,
    *,
    source: BinaryIO,
    original_filename: str | None,
    declared_size: int | None,
    category_id: str | None,
    allowed_extensions: Collection[str],
    max_bytes: int,
) -> FileAsset:
    """Store an uploaded file read from ``source`` and record it in the catalog.

    Nothing is written unless every check passes.
    """

    validate_upload(
        original_filename=original_filename,
        declared_size=declared_size,
        category_id=category_id,
        allowed_extensions=allowed_extensions,
        max_bytes=max_bytes,
    )
    upload = PendingUpload(storage, original_filename, max_bytes=max_bytes)
    try:
        while True:
            chunk = source.read(CHUNK_SIZE)
            if not chunk:
                break
            upload.write(chunk)
        upload.close()
    except BaseException:
        upload.discard()
        raise
    return upload.complete(session, category_id)


__all__ = [
    "PendingUpload",
    "ensure_allowed_type",
    "ensure_category_given",
    "ensure_within_limit",
    "ingest_file",
    "too_large_message",
    "unsupported_type_message",
    "validate_upload",
]
