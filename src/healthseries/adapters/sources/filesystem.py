"""Snapshot source reading files from a local directory."""

import asyncio
from datetime import date
from pathlib import Path

from healthseries.adapters.logging import get_logger
from healthseries.core.dates import snapshot_name
from healthseries.core.exceptions import MalformedSnapshot
from healthseries.core.normalize import parse_snapshot
from healthseries.core.outcomes import FetchOutcome, Found, NotFound, TransportError

logger = get_logger(__name__)


class DirectorySnapshotSource:
    """Reads health-check-YYYY-MM-DD.json files from a directory.

    File reads run in a worker thread so they don't block the event loop.

    Args:
        directory: Directory holding the snapshot files.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def path_for(self, day: date) -> Path:
        return self._directory / snapshot_name(day)

    async def fetch(self, day: date) -> FetchOutcome:
        path = self.path_for(day)
        try:
            body = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return NotFound(day)
        except OSError as e:
            logger.debug("Error reading %s: %s", path, e)
            return TransportError(day, f"{type(e).__name__}: {e}")

        try:
            snapshot = parse_snapshot(body)
        except MalformedSnapshot as e:
            logger.debug("Malformed snapshot %s: %s", path, e)
            return TransportError(day, str(e), "malformed")
        return Found(day, snapshot)
