"""Bounded diagnostics storage for long-running dashboard servers.

Every reload of the series appends a handful of entries; the buffer
keeps the newest max_size of them.
"""

from collections import deque

from healthseries.adapters.storage.in_memory import InMemoryLogStorage
from healthseries.core.models import LogEntry


class RingBufferLogStorage(InMemoryLogStorage):
    """InMemoryLogStorage that evicts its oldest entry once full.

    Args:
        max_size: Number of entries retained.

    Raises:
        ValueError: If max_size is below 1.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        super().__init__()
        self._max_size = max_size
        self._entries = deque[LogEntry](maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._max_size
