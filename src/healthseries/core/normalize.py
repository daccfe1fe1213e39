"""Normalization of raw snapshot payloads into DailyRecord objects."""

import json
import math
from collections.abc import Iterable
from datetime import date
from typing import Any

from healthseries.core.exceptions import MalformedSnapshot
from healthseries.core.models import (
    DEFAULT_SERVICES,
    MISSING,
    DailyRecord,
    Present,
    ServiceSpec,
    ServiceState,
    Value,
)
from healthseries.core.outcomes import RawSnapshot


def parse_snapshot(body: bytes | str) -> RawSnapshot:
    """Parse a snapshot body into a dict.

    Args:
        body: Raw JSON document.

    Returns:
        The decoded JSON object.

    Raises:
        MalformedSnapshot: If body is not valid JSON or not a JSON object.
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and the int digit limit
        raise MalformedSnapshot(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedSnapshot(
            f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def _section(snapshot: RawSnapshot, key: str) -> dict[str, Any]:
    section = snapshot.get(key)
    return section if isinstance(section, dict) else {}


def _numeric(raw: Any) -> Value:
    # bool is an int subclass but never a measurement
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return MISSING
    try:
        number = float(raw)
    except OverflowError:
        return MISSING
    if not math.isfinite(number):
        return MISSING
    return Present(number)


def normalize(
    day: date,
    snapshot: RawSnapshot,
    services: Iterable[ServiceSpec] = DEFAULT_SERVICES,
) -> DailyRecord:
    """Map a raw snapshot onto the canonical DailyRecord.

    Absent or non-numeric measurements become MISSING. A service is ACTIVE
    only when its raw field is exactly the string "active".

    Args:
        day: Day the snapshot belongs to.
        snapshot: Parsed snapshot payload.
        services: Service name to raw field mapping.

    Returns:
        DailyRecord for day.
    """
    memory = _section(snapshot, "memory")
    disk = _section(snapshot, "disk")
    raw_services = _section(snapshot, "services")

    return DailyRecord(
        date=day,
        used_memory_mb=_numeric(memory.get("used_mb")),
        disk_usage_percent=_numeric(disk.get("usage_percentage")),
        services={
            service.name: (
                ServiceState.ACTIVE
                if raw_services.get(service.field) == "active"
                else ServiceState.INACTIVE
            )
            for service in services
        },
    )
