"""Snapshot source adapters implementing SnapshotSourcePort."""

from healthseries.adapters.sources.filesystem import DirectorySnapshotSource
from healthseries.adapters.sources.http import HttpSnapshotSource
from healthseries.adapters.sources.in_memory import InMemorySnapshotSource

__all__ = [
    "DirectorySnapshotSource",
    "HttpSnapshotSource",
    "InMemorySnapshotSource",
]
