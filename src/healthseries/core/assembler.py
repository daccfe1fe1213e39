"""Assembly of a date range of snapshots into a sorted Series."""

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from healthseries.core.dates import DateRange, snapshot_name
from healthseries.core.exceptions import NoDataInRange
from healthseries.core.logs import debug, info, warn
from healthseries.core.models import (
    DEFAULT_SERVICES,
    DailyRecord,
    LogEntry,
    Series,
    SeriesSummary,
    ServiceSpec,
)
from healthseries.core.normalize import normalize
from healthseries.core.outcomes import FetchOutcome, Found, NotFound, TransportError
from healthseries.core.ports import LogStoragePort, SnapshotSourcePort

DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class AssemblyResult:
    """An assembled series and its summary."""

    series: Series
    summary: SeriesSummary


class SeriesAssembler:
    """Fetches, normalizes and orders the snapshots of a date range.

    Days whose snapshot is missing or unreadable are skipped and logged;
    they never abort the assembly. The resulting Series is the same
    whether fetches run sequentially or concurrently.

    Args:
        source: Adapter implementing SnapshotSourcePort.
        log_storage: Optional storage for per-day diagnostics.
        services: Service name to raw field mapping for normalization.
        max_concurrency: Number of fetches allowed in flight. 1 fetches
            sequentially in date order.
        fetch_timeout: Seconds allowed for a single fetch. None disables
            the bound.
    """

    def __init__(
        self,
        source: SnapshotSourcePort,
        log_storage: LogStoragePort | None = None,
        services: Iterable[ServiceSpec] = DEFAULT_SERVICES,
        max_concurrency: int = 1,
        fetch_timeout: float | None = DEFAULT_FETCH_TIMEOUT_SECONDS,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._source = source
        self._log_storage = log_storage
        self._services = tuple(services)
        self._max_concurrency = max_concurrency
        self._fetch_timeout = fetch_timeout

    async def assemble(self, start: date, end: date) -> AssemblyResult:
        """Build the Series for the inclusive range [start, end].

        Raises:
            InvalidRange: If start is after end. Nothing is fetched.
            NoDataInRange: If no day in the range yielded a record.
        """
        days = _unique_days(DateRange(start, end))
        await self._log(
            info(
                "Loading snapshots",
                start=start.isoformat(),
                end=end.isoformat(),
                days=len(days),
            )
        )

        outcomes = await self._fetch_all(days)

        records: list[DailyRecord] = []
        for day, outcome in zip(days, outcomes):
            record = await self._reduce(day, outcome)
            if record is not None:
                records.append(record)

        # completion order must not leak into the result
        records.sort(key=lambda r: r.date)

        if not records:
            await self._log(
                warn("No snapshots found", start=start.isoformat(), end=end.isoformat())
            )
            raise NoDataInRange(start.isoformat(), end.isoformat())

        series = Series(tuple(records))
        summary = series.summary()
        await self._log(
            info(
                "Loaded snapshots",
                count=summary.count,
                first=summary.first_date.isoformat(),
                last=summary.last_date.isoformat(),
                skipped=len(days) - summary.count,
            )
        )
        return AssemblyResult(series=series, summary=summary)

    async def _fetch_all(self, days: list[date]) -> list[FetchOutcome]:
        """Fetch every day, returning outcomes in the same order as days."""
        if self._max_concurrency == 1:
            return [await self._fetch_one(day) for day in days]

        semaphore = asyncio.Semaphore(self._max_concurrency)
        slots: list[FetchOutcome | None] = [None] * len(days)

        async def fetch_into(index: int, day: date) -> None:
            async with semaphore:
                slots[index] = await self._fetch_one(day)

        await asyncio.gather(*(fetch_into(i, day) for i, day in enumerate(days)))
        return [
            outcome if outcome is not None else TransportError(day, "no outcome")
            for day, outcome in zip(days, slots)
        ]

    async def _fetch_one(self, day: date) -> FetchOutcome:
        """Fetch one day, converting timeouts and source errors to outcomes."""
        try:
            return await asyncio.wait_for(
                self._source.fetch(day), timeout=self._fetch_timeout
            )
        except asyncio.TimeoutError:
            return TransportError(
                day, f"fetch timed out after {self._fetch_timeout}s", "timeout"
            )
        except Exception as e:
            return TransportError(day, f"{type(e).__name__}: {e}")

    async def _reduce(self, day: date, outcome: FetchOutcome) -> DailyRecord | None:
        """Turn one outcome into a record, or log why the day is skipped."""
        name = snapshot_name(day)
        if isinstance(outcome, Found):
            await self._log(debug("Loaded snapshot", snapshot=name))
            return normalize(day, outcome.snapshot, self._services)
        if isinstance(outcome, NotFound):
            await self._log(debug("Snapshot not found", snapshot=name))
            return None
        await self._log(
            warn(
                "Failed to load snapshot",
                snapshot=name,
                reason=outcome.reason,
                detail=outcome.detail,
            )
        )
        return None

    async def _log(self, entry: LogEntry) -> None:
        if self._log_storage is not None:
            await self._log_storage.write(entry)


def _unique_days(days: Iterable[date]) -> list[date]:
    """Keep the first day for each distinct snapshot name."""
    seen: set[str] = set()
    unique: list[date] = []
    for day in days:
        name = snapshot_name(day)
        if name in seen:
            continue
        seen.add(name)
        unique.append(day)
    return unique
