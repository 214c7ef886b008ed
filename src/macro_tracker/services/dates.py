"""Date helpers shared by services."""

from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta


def utc_today() -> date:
    """Return the current calendar day in UTC."""
    return datetime.now(tz=UTC).date()


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield each day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
