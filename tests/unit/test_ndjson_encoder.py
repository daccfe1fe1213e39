"""Tests for NDJSON log encoder."""

import json
from collections.abc import AsyncIterable

import pytest

from healthseries.core.encoding.ndjson import encode_entry, encode_logs
from healthseries.core.models import LogEntry

pytestmark = pytest.mark.core


async def _aiter(entries: list[LogEntry]) -> AsyncIterable[LogEntry]:
    for entry in entries:
        yield entry


class TestNdjsonEncoder:
    """Tests for NDJSON encoding of log entries."""

    async def test_encode_single_entry(self) -> None:
        """Single LogEntry encodes to one JSON line."""
        entry = LogEntry(
            timestamp=1702300000.0,
            level="INFO",
            message="Loading snapshots",
        )

        result = await encode_logs(_aiter([entry]))

        parsed = json.loads(result.strip())
        assert parsed["timestamp"] == 1702300000.0
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Loading snapshots"
        assert parsed["attributes"] == {}

    async def test_encode_multiple_entries(self) -> None:
        """Multiple entries are newline-delimited."""
        entries = [
            LogEntry(timestamp=1702300000.0, level="DEBUG", message="First"),
            LogEntry(timestamp=1702300001.0, level="WARN", message="Second"),
        ]

        result = await encode_logs(_aiter(entries))

        lines = result.strip().split("\n")
        assert len(lines) == 2
        assert json.loads(lines[0])["message"] == "First"
        assert json.loads(lines[1])["message"] == "Second"

    async def test_encode_empty_iterable(self) -> None:
        """Empty input returns empty string."""
        assert await encode_logs(_aiter([])) == ""

    async def test_encode_entry_with_attributes(self) -> None:
        """Attributes are serialized correctly."""
        entry = LogEntry(
            timestamp=1702300000.0,
            level="WARN",
            message="Failed to load snapshot",
            attributes={
                "snapshot": "health-check-2025-02-02.json",
                "reason": "timeout",
                "skipped": 3,
            },
        )

        result = await encode_logs(_aiter([entry]))

        parsed = json.loads(result.strip())
        assert parsed["attributes"]["snapshot"] == "health-check-2025-02-02.json"
        assert parsed["attributes"]["reason"] == "timeout"
        assert parsed["attributes"]["skipped"] == 3

    async def test_output_ends_with_newline(self) -> None:
        entry = LogEntry(timestamp=1702300000.0, level="INFO", message="Test")

        result = await encode_logs(_aiter([entry]))

        assert result.endswith("\n")


class TestSnapshotDate:
    def test_snapshot_attribute_adds_date(self) -> None:
        entry = LogEntry(
            timestamp=1.0,
            level="WARN",
            message="Failed to load snapshot",
            attributes={"snapshot": "health-check-2025-02-03.json", "reason": "timeout"},
        )

        assert encode_entry(entry)["date"] == "2025-02-03"

    @pytest.mark.parametrize("snapshot", ["notes.txt", 3])
    def test_unrecognised_snapshot_attribute_has_no_date(self, snapshot) -> None:
        entry = LogEntry(
            timestamp=1.0, level="DEBUG", message="x", attributes={"snapshot": snapshot}
        )

        assert "date" not in encode_entry(entry)
