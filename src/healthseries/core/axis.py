"""Y-axis range policies for the dashboard charts."""

import math
from collections.abc import Iterable

from healthseries.core.models import AxisRange, Value, present_values

MEMORY_ROUNDING_MB = 50
MEMORY_HEADROOM_MB = 50
DISK_ROUNDING_PERCENT = 5
DISK_MIN_CEILING_PERCENT = 100
DISK_STEP_PERCENT = 5

SERVICE_AXIS = AxisRange(min=0, max=1, step=1)


def _require_values(values: Iterable[Value], metric: str) -> list[float]:
    numbers = present_values(list(values))
    if not numbers:
        raise ValueError(f"no {metric} values present to compute an axis from")
    return numbers


def memory_step(span: float) -> int:
    """Tick step for a memory axis spanning span MB.

    Boundaries are inclusive: 100 -> 10, 300 -> 25, 301 -> 50.
    """
    if span <= 100:
        return 10
    if span <= 300:
        return 25
    return 50


def memory_axis(values: Iterable[Value]) -> AxisRange:
    """Axis for used memory (MB).

    The floor is rounded down to a multiple of 50 (never below 0). The
    ceiling is rounded up to a multiple of 50 plus 50 MB of headroom.

    Raises:
        ValueError: If every value is missing.
    """
    numbers = _require_values(values, "memory")
    y_min = max(0, math.floor(min(numbers) / MEMORY_ROUNDING_MB) * MEMORY_ROUNDING_MB)
    y_max = (
        math.ceil(max(numbers) / MEMORY_ROUNDING_MB) * MEMORY_ROUNDING_MB
        + MEMORY_HEADROOM_MB
    )
    return AxisRange(min=y_min, max=y_max, step=memory_step(y_max - y_min))


def disk_axis(values: Iterable[Value]) -> AxisRange:
    """Axis for disk usage (%).

    Always starts at 0 and shows at least 0-100; grows past 100 in steps
    of 5 when usage exceeds it.

    Raises:
        ValueError: If every value is missing.
    """
    numbers = _require_values(values, "disk")
    y_max = max(
        DISK_MIN_CEILING_PERCENT,
        math.ceil(max(numbers) / DISK_ROUNDING_PERCENT) * DISK_ROUNDING_PERCENT,
    )
    return AxisRange(min=0, max=y_max, step=DISK_STEP_PERCENT)
