"""Timestamp normalization for values read back from Firestore."""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as an aware UTC datetime; naive values are taken to be UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
