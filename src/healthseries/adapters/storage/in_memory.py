"""In-memory storage adapter for diagnostic logs."""

from collections.abc import AsyncIterable, MutableSequence

from healthseries.core.models import LogEntry


def _matches(entry: LogEntry, since: float, level: str | None) -> bool:
    if entry.timestamp <= since:
        return False
    return level is None or entry.level.upper() == level.upper()


class InMemoryLogStorage:
    """Unbounded diagnostics storage for one dashboard session.

    Nothing is persisted. read() yields entries newer than since, oldest
    first, optionally restricted to one level (case-insensitive).
    """

    def __init__(self) -> None:
        self._entries: MutableSequence[LogEntry] = []

    async def write(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    async def read(
        self, since: float = 0, level: str | None = None
    ) -> AsyncIterable[LogEntry]:
        # snapshot first so concurrent writes don't disturb iteration
        selected = [e for e in self._entries if _matches(e, since, level)]
        selected.sort(key=lambda e: e.timestamp)
        for entry in selected:
            yield entry
