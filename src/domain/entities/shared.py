"""Shared helpers for domain entities.

Pure utility functions with zero external dependencies.
"""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return a timezone-aware UTC datetime; naive values are assumed UTC.

    SQLite drops tzinfo on round-trip, so values read back from the store go
    through here before reaching domain objects.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
