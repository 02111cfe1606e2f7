"""
Time helpers.

All timestamps in generated documents are timezone-aware UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info.

    Prefer this over ``datetime.utcnow()`` (which returns naive datetimes).
    """
    return datetime.now(tz=timezone.utc)


def utc_isoformat(dt: datetime | None = None) -> str:
    """ISO-8601 string for ``dt`` (default: now), e.g. ``2026-10-18T09:00:00+00:00``."""
    return (dt or utcnow()).isoformat()
