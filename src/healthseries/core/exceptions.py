"""Exceptions raised by the series pipeline."""


class HealthSeriesError(Exception):
    """Base class for errors surfaced to the dashboard caller."""


class InvalidRange(HealthSeriesError, ValueError):
    """The requested start date is after the end date."""

    def __init__(self, start: object, end: object) -> None:
        super().__init__(f"start date {start} is after end date {end}")
        self.start = start
        self.end = end


class NoDataInRange(HealthSeriesError):
    """No snapshot in the requested range could be retrieved."""

    def __init__(self, start: object, end: object) -> None:
        super().__init__(f"no data found between {start} and {end}")
        self.start = start
        self.end = end


class MalformedSnapshot(HealthSeriesError, ValueError):
    """A snapshot payload could not be parsed as a JSON object."""
