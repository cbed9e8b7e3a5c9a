"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed as an aware UTC datetime.

    Columns store naive UTC values, so a naive value is interpreted as UTC.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def ensure_utc_naive(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC but without ``tzinfo``."""

    normalized = ensure_utc(value)
    if normalized is None:
        return None
    return normalized.replace(tzinfo=None)


def utc_now_naive() -> datetime:
    """Return the current UTC time without attaching ``tzinfo``."""

    return utc_now().replace(tzinfo=None)
