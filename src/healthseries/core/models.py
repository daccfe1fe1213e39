"""Core domain models for daily health-check series."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


@dataclass(frozen=True)
class Present:
    """A measured numeric value."""

    value: float


class Missing:
    """Marker for a value that was not available in the snapshot.

    Distinct from zero and from False. Use the ``MISSING`` singleton.
    """

    _instance: "Missing | None" = None

    def __new__(cls) -> "Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing()

Value = Present | Missing


def present_values(values: "list[Value] | tuple[Value, ...]") -> list[float]:
    """Return the numbers carried by the Present entries of values."""
    return [v.value for v in values if isinstance(v, Present)]


class ServiceState(Enum):
    """Normalized state of a monitored service."""

    ACTIVE = "active"
    INACTIVE = "inactive"

    @property
    def as_number(self) -> int:
        """1 for ACTIVE, 0 for INACTIVE (chart y-value)."""
        return 1 if self is ServiceState.ACTIVE else 0


@dataclass(frozen=True)
class ServiceSpec:
    """Maps a canonical service name to its raw snapshot field.

    Attributes:
        name: Canonical service name (e.g., "database").
        field: Key under the snapshot's ``services`` section.
        label: Display label for charts.
    """

    name: str
    field: str
    label: str


DEFAULT_SERVICES: tuple[ServiceSpec, ...] = (
    ServiceSpec(name="primary-app", field="mitra", label="Mitra"),
    ServiceSpec(name="database", field="postgresql", label="PostgreSQL"),
    ServiceSpec(name="reverse-proxy", field="nginx", label="Nginx"),
)


@dataclass(frozen=True)
class DailyRecord:
    """Canonical health-check record for one day.

    Attributes:
        date: The calendar day the snapshot belongs to.
        used_memory_mb: Used memory in MB, or MISSING.
        disk_usage_percent: Disk usage percentage, or MISSING.
        services: Service name to ServiceState.
    """

    date: date
    used_memory_mb: Value = MISSING
    disk_usage_percent: Value = MISSING
    services: dict[str, ServiceState] = field(default_factory=dict)


@dataclass(frozen=True)
class SeriesSummary:
    """Count and date span of an assembled series."""

    count: int
    first_date: date
    last_date: date


@dataclass(frozen=True)
class Series:
    """Records ordered strictly by ascending date.

    Raises:
        ValueError: If records are out of order or share a date.
    """

    records: tuple[DailyRecord, ...] = ()

    def __post_init__(self) -> None:
        for prev, cur in zip(self.records, self.records[1:]):
            if cur.date <= prev.date:
                raise ValueError(
                    f"series dates must be strictly increasing: "
                    f"{prev.date.isoformat()} then {cur.date.isoformat()}"
                )

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def dates(self) -> list[date]:
        return [r.date for r in self.records]

    def summary(self) -> SeriesSummary:
        """Summarize the series.

        Raises:
            ValueError: If the series is empty.
        """
        if not self.records:
            raise ValueError("cannot summarize an empty series")
        return SeriesSummary(
            count=len(self.records),
            first_date=self.records[0].date,
            last_date=self.records[-1].date,
        )


@dataclass(frozen=True)
class AxisRange:
    """Scale of a chart's y-axis.

    Attributes:
        min: Lowest value shown.
        max: Highest value shown.
        step: Distance between ticks.
    """

    min: float
    max: float
    step: float


@dataclass(frozen=True)
class LogEntry:
    """A structured diagnostic log entry.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Log level (e.g., INFO, WARN, DEBUG).
        message: The log message.
        attributes: Additional structured fields.
    """

    timestamp: float
    level: str
    message: str
    attributes: dict[str, str | int | float | bool] = field(default_factory=dict)
