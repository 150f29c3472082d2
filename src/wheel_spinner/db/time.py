# src/wheel_spinner/db/time.py
"""Timestamps for shared wheels, reads and reviews."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to a timestamp read back without tzinfo.

    SQLite stores ``DateTime(timezone=True)`` columns as naive text, so rows
    loaded from it lose the offset they were written with. Every timestamp
    this app writes is UTC.
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)
