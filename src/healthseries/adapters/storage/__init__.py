"""Storage adapters implementing LogStoragePort."""

from healthseries.adapters.storage.in_memory import InMemoryLogStorage
from healthseries.adapters.storage.ring_buffer import RingBufferLogStorage

__all__ = [
    "InMemoryLogStorage",
    "RingBufferLogStorage",
]
