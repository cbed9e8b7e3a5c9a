"""Helpers for presenting and naming stored files."""

from __future__ import annotations

import time
from pathlib import PurePath
from uuid import uuid4

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_file_size(size_bytes: int) -> str:
    """Return ``size_bytes`` as a human readable string (``"1.5 KB"``)."""

    if size_bytes <= 0:
        return "0 Bytes"
    exponent = 0
    while exponent < len(_SIZE_UNITS) - 1 and size_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    text = f"{size_bytes / 1024 ** exponent:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[exponent]}"


def file_extension(filename: str) -> str:
    """Return the extension of ``filename`` including the dot, or ``""``."""

    # Only the final path component counts; clients may send full paths.
    name = PurePath(filename.replace("\\", "/")).name
    return PurePath(name).suffix


def generate_stored_name(original_filename: str) -> str:
    """Return a collision resistant storage name keeping the original extension."""

    millis = int(time.time() * 1000)
    return f"{millis}-{uuid4().hex}{file_extension(original_filename)}"
