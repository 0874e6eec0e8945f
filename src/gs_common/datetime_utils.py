"""UTC datetime utilities."""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def utc_date(value: datetime) -> date:
    """Calendar date of a timestamp in UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(timezone.utc).date()
