"""Utility helpers for reusable functionality."""

from .datetime import ensure_utc, ensure_utc_naive, utc_now, utc_now_naive
from .files import file_extension, format_file_size, generate_stored_name

__all__ = [
    "ensure_utc",
    "ensure_utc_naive",
    "file_extension",
    "format_file_size",
    "generate_stored_name",
    "utc_now",
    "utc_now_naive",
]
