"""UTC calendar-day helpers shared by stats, water logging and goal evaluation."""

from datetime import UTC, date, datetime, time, timedelta


def utc_today(now: datetime | None = None) -> date:
    """Return the current UTC calendar date."""
    current = now or datetime.now(tz=UTC)
    if current.tzinfo is None:
        current = current.replace(tzinfo=UTC)
    return current.astimezone(UTC).date()


def previous_day(day: date) -> date:
    """Return the calendar day before ``day``."""
    return day - timedelta(days=1)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return the half-open [start, end) UTC interval covering ``day``."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)


def parse_day(value: object) -> date | None:
    """Parse a stored day value (``YYYY-MM-DD`` or ISO timestamp)."""
    if isinstance(value, datetime):
        return utc_today(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    if len(value) == len("YYYY-MM-DD"):
        return date.fromisoformat(value)
    return utc_today(datetime.fromisoformat(value))


def format_day(day: date | None) -> str | None:
    """Format a day for storage."""
    return day.isoformat() if day else None
