"""In-memory snapshot source."""

from collections.abc import Mapping
from datetime import date

from healthseries.core.outcomes import FetchOutcome, Found, NotFound, RawSnapshot


class InMemorySnapshotSource:
    """Serves snapshots from a dict keyed by day.

    Values may be raw snapshot dicts or prepared outcomes (to simulate
    transport failures). Days not in the dict are NotFound. Suitable for
    testing and demos.
    """

    def __init__(
        self, snapshots: Mapping[date, RawSnapshot | FetchOutcome] | None = None
    ) -> None:
        self._snapshots = dict(snapshots or {})
        self.requested: list[date] = []

    def put(self, day: date, snapshot: RawSnapshot | FetchOutcome) -> None:
        self._snapshots[day] = snapshot

    async def fetch(self, day: date) -> FetchOutcome:
        self.requested.append(day)
        value = self._snapshots.get(day)
        if value is None:
            return NotFound(day)
        if isinstance(value, dict):
            return Found(day, value)
        return value
