"""Calendar-date enumeration and snapshot resource naming."""

import re
from collections.abc import Iterator
from datetime import date, timedelta

from healthseries.core.exceptions import InvalidRange

SNAPSHOT_PREFIX = "health-check-"
SNAPSHOT_SUFFIX = ".json"
DEFAULT_DATE_FORMAT = "%Y-%m-%d"

_SNAPSHOT_NAME_RE = re.compile(r"health-check-(\d{4})-(\d{2})-(\d{2})\.json")

_ONE_DAY = timedelta(days=1)


class DateRange:
    """Inclusive range of calendar days.

    Iterating is lazy and restartable: each ``iter()`` starts again at
    ``start`` and stops after ``end``.

    Args:
        start: First day of the range.
        end: Last day of the range (inclusive).

    Raises:
        InvalidRange: If start is after end.
    """

    def __init__(self, start: date, end: date) -> None:
        if start > end:
            raise InvalidRange(start.isoformat(), end.isoformat())
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while True:
            yield current
            if current == self.end:
                return
            current += _ONE_DAY

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __repr__(self) -> str:
        return f"DateRange({self.start.isoformat()}, {self.end.isoformat()})"


def snapshot_name(day: date) -> str:
    """Return the snapshot file name for day, e.g. health-check-2025-02-03.json."""
    return f"{SNAPSHOT_PREFIX}{day.year:04d}-{day.month:02d}-{day.day:02d}{SNAPSHOT_SUFFIX}"


def parse_snapshot_name(name: str) -> date | None:
    """Recover the day from a snapshot file name.

    Args:
        name: File name or path ending in a snapshot file name.

    Returns:
        The encoded day, or None if name is not a snapshot name or
        encodes an impossible date.
    """
    match = _SNAPSHOT_NAME_RE.search(name)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(value: str) -> date:
    """Parse an ISO YYYY-MM-DD string.

    Raises:
        ValueError: If value is not a valid ISO date.
    """
    return date.fromisoformat(value.strip())


def format_date(day: date, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format day for display using a strftime pattern."""
    return day.strftime(fmt)
