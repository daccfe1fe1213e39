"""NDJSON encoder for the /logs diagnostics stream.

Entries that concern one snapshot also get a top-level "date" key, so a
consumer can group fetch failures by day without parsing file names.
"""

import json
from collections.abc import AsyncIterable
from typing import Any

from healthseries.core.dates import parse_snapshot_name
from healthseries.core.models import LogEntry


def encode_entry(entry: LogEntry) -> dict[str, Any]:
    """One diagnostics entry as a JSON-ready dict."""
    obj: dict[str, Any] = {
        "timestamp": entry.timestamp,
        "level": entry.level,
        "message": entry.message,
        "attributes": entry.attributes,
    }
    snapshot = entry.attributes.get("snapshot")
    if isinstance(snapshot, str):
        day = parse_snapshot_name(snapshot)
        if day is not None:
            obj["date"] = day.isoformat()
    return obj


async def encode_logs(entries: AsyncIterable[LogEntry]) -> str:
    """Encode entries as newline-delimited JSON, one object per line.

    Returns an empty string when there are no entries.
    """
    lines = [json.dumps(encode_entry(entry)) async for entry in entries]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
