"""Helpers for reading loosely typed Firestore documents into DTOs."""

from datetime import datetime
from typing import Any

from venuehub.shared.utils import ensure_utc


def timestamp(value: Any) -> datetime | None:
    """UTC datetime for a stored timestamp; anything else (legacy strings) is None."""
    return ensure_utc(value) if isinstance(value, datetime) else None


def int_or(value: Any, default: int) -> int:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        return int(value)
    return int(str(value))


def str_list(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(str(v) for v in value)
