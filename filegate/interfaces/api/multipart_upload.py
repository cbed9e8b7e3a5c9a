"""Streaming reader for the multipart body of the upload endpoint.

The body is parsed while it arrives. The file type is checked as soon as the
headers of the file part are known, and file bytes go straight to storage
without a temporary copy.
"""

from __future__ import annotations

from collections.abc import Collection

from python_multipart.multipart import MultipartParser, parse_options_header
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request

from filegate.application.use_cases.ingestion import (
    PendingUpload,
    ensure_allowed_type,
    ensure_category_given,
)
from filegate.domain.exceptions import InvalidInputError
from filegate.infrastructure.storage import LocalFileStorage

FILE_FIELD = "file"
CATEGORY_FIELD = "categoryId"
MAX_FIELD_BYTES = 1024


class NoFileUploadedError(InvalidInputError):
    default_message = "No file uploaded"


class MultipartUploadReader:
    """Collect the form fields of an upload and stream its file part to storage.

    Only the first part named ``file`` is stored; other file parts are skipped.
    """

    def __init__(
        self,
        storage: LocalFileStorage,
        *,
        allowed_extensions: Collection[str],
        max_bytes: int,
    ) -> None:
        self.storage = storage
        self.allowed_extensions = allowed_extensions
        self.max_bytes = max_bytes
        self.fields: dict[str, str] = {}
        self.upload: PendingUpload | None = None
        self._header_name = b""
        self._header_value = b""
        self._disposition = b""
        self._target: str | None = None
        self._field_name = ""
        self._field_value = bytearray()

    def callbacks(self) -> dict:
        return {
            "on_part_begin": self._on_part_begin,
            "on_header_field": self._on_header_field,
            "on_header_value": self._on_header_value,
            "on_header_end": self._on_header_end,
            "on_headers_finished": self._on_headers_finished,
            "on_part_data": self._on_part_data,
            "on_part_end": self._on_part_end,
        }

    def discard(self) -> None:
        if self.upload is not None:
            self.upload.discard()

    def _on_part_begin(self) -> None:
        self._disposition = b""
        self._target = None

    def _on_header_field(self, data: bytes, start: int, end: int) -> None:
        self._header_name += data[start:end]

    def _on_header_value(self, data: bytes, start: int, end: int) -> None:
        self._header_value += data[start:end]

    def _on_header_end(self) -> None:
        if self._header_name.lower() == b"content-disposition":
            self._disposition = self._header_value
        self._header_name = b""
        self._header_value = b""

    def _on_headers_finished(self) -> None:
        _, options = parse_options_header(self._disposition)
        name = options.get(b"name", b"").decode("utf-8", "replace")

        if b"filename" not in options:
            self._target = "field"
            self._field_name = name
            self._field_value = bytearray()
            return

        filename = options[b"filename"].decode("utf-8", "replace")
        # Browsers send an empty filename when no file was chosen.
        if name != FILE_FIELD or not filename or self.upload is not None:
            return

        if CATEGORY_FIELD in self.fields:
            ensure_category_given(self.fields[CATEGORY_FIELD])
        ensure_allowed_type(filename, self.allowed_extensions)
        self.upload = PendingUpload(self.storage, filename, max_bytes=self.max_bytes)
        self._target = "file"

    def _on_part_data(self, data: bytes, start: int, end: int) -> None:
        if self._target == "file":
            self.upload.write(data[start:end])
        elif self._target == "field":
            self._field_value += data[start:end]
            if len(self._field_value) > MAX_FIELD_BYTES:
                raise InvalidInputError(f"Form field {self._field_name} is too large")

    def _on_part_end(self) -> None:
        if self._target == "file":
            self.upload.close()
        elif self._target == "field":
            self.fields[self._field_name] = self._field_value.decode("utf-8", "replace")
        self._target = None


async def read_upload(request: Request, reader: MultipartUploadReader) -> PendingUpload:
    """Feed the body of ``request`` to ``reader`` and return the stored upload.

    Parsing stops at the first rejected part, so the rest of the body is never
    received.
    """

    content_type, params = parse_options_header(request.headers.get("content-type", ""))
    boundary = params.get(b"boundary")
    if content_type != b"multipart/form-data" or not boundary:
        raise NoFileUploadedError()

    parser = MultipartParser(boundary, reader.callbacks())
    try:
        async for chunk in request.stream():
            if chunk:
                await run_in_threadpool(parser.write, chunk)
        await run_in_threadpool(parser.finalize)
    except BaseException:
        reader.discard()
        raise

    if reader.upload is None:
        raise NoFileUploadedError()
    return reader.upload


__all__ = [
    "CATEGORY_FIELD",
    "FILE_FIELD",
    "MultipartUploadReader",
    "NoFileUploadedError",
    "read_upload",
]
