"""Port interfaces for snapshot sources, diagnostics storage and renderers.

These protocols define the contracts that adapters must implement.
The core pipeline depends only on these interfaces, not concrete implementations.
"""

from collections.abc import AsyncIterable
from datetime import date
from typing import Any, Protocol, runtime_checkable

from healthseries.core.models import LogEntry
from healthseries.core.outcomes import FetchOutcome


@runtime_checkable
class SnapshotSourcePort(Protocol):
    """Port for retrieving one day's snapshot.

    Adapters implementing this protocol perform a single read per call,
    with no retries and no caching.
    Examples: HttpSnapshotSource, DirectorySnapshotSource, InMemorySnapshotSource.
    """

    async def fetch(self, day: date) -> FetchOutcome:
        """Fetch the snapshot for day.

        Returns:
            Found, NotFound or TransportError. Adapters report failures
            as outcomes rather than raising.
        """
        ...


@runtime_checkable
class LogStoragePort(Protocol):
    """Port for diagnostic log storage.

    Examples: InMemoryLogStorage, RingBufferLogStorage.
    """

    async def write(self, entry: LogEntry) -> None:
        """Write a log entry to storage."""
        ...

    def read(
        self, since: float = 0, level: str | None = None
    ) -> AsyncIterable[LogEntry]:
        """Read log entries since the given timestamp.

        Args:
            since: Unix timestamp. Returns entries with timestamp > since.
                   Default 0 returns all entries.
            level: Optional level filter (case-insensitive).

        Returns:
            Async iterable of LogEntry objects, ordered by timestamp ascending.
        """
        ...


@runtime_checkable
class ChartRendererPort(Protocol):
    """Port for the external chart-drawing collaborator.

    The renderer owns all visual styling. It receives ChartData and
    returns an opaque handle that can later be disposed.
    """

    def render(self, chart: Any) -> Any:
        """Draw chart and return a handle to the drawn instance."""
        ...

    def dispose(self, handle: Any) -> None:
        """Destroy a previously rendered instance."""
        ...
