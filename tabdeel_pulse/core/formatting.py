"""Display helpers shared by the dashboard, messaging and notification endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

_UNITS = (
    (31536000, "years"),
    (2592000, "months"),
    (86400, "days"),
    (3600, "hours"),
    (60, "minutes"),
)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes (as returned by SQLite) as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def time_ago(moment: datetime, now: Optional[datetime] = None) -> str:
    """Render ``moment`` relative to ``now``, e.g. ``"3 hours ago"`` or ``"Just now"``.

    A unit is used once more than one whole unit has elapsed, so 90 seconds is
    ``"1 minutes ago"`` and exactly 60 seconds is still ``"Just now"``.
    """
    seconds = int((as_utc(now or utc_now()) - as_utc(moment)).total_seconds())
    for size, label in _UNITS:
        if seconds / size > 1:
            return f"{seconds // size} {label} ago"
    return "Just now"


def clock_time(moment: datetime) -> str:
    """``HH:MM`` rendering used for chat message timestamps."""
    return as_utc(moment).strftime("%H:%M")


def truncate(text: str, limit: int = 50) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with ``...``."""
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text
