"""Column helpers shared by entity modules."""

from datetime import datetime, timezone

from sqlalchemy import DateTime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_type() -> DateTime:
    """Timezone-aware timestamp column type."""
    return DateTime(timezone=True)
