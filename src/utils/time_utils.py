"""
Timezone-aware datetime utilities.
All timestamps in this project are produced in UTC.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def to_iso(dt: datetime) -> str:
    """
    Format a datetime as an ISO 8601 string in UTC with a 'Z' suffix.

    Naive datetimes are assumed to already be UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def date_part(ts: str) -> str:
    """
    Return the calendar date of an OpenF1 timestamp.

    OpenF1 returns ISO 8601 strings like '2024-03-02T15:00:00+00:00';
    the result is '2024-03-02'.
    """
    return ts.split("T")[0]


def parse_openf1_timestamp(ts: Optional[str]) -> Optional[datetime]:
    """
    Parse an OpenF1 API timestamp string to a UTC-aware datetime.

    Args:
        ts: Timestamp string from OpenF1 API.

    Returns:
        UTC-aware datetime, or None if parsing fails.
    """
    if not ts:
        return None
    try:
        dt = datetime.fromisoformat(ts)
    except (ValueError, TypeError):
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
