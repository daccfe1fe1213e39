"""Tests for y-axis range policies."""

import pytest

from healthseries.core.axis import (
    SERVICE_AXIS,
    disk_axis,
    memory_axis,
    memory_step,
)
from healthseries.core.models import MISSING, AxisRange, Present


def values(*numbers: float) -> list:
    return [Present(n) for n in numbers]


@pytest.mark.core
@pytest.mark.tier(0)
class TestMemoryAxis:
    """Tests for memory_axis()."""

    def test_rounds_to_fifty_with_headroom(self) -> None:
        """[120, 340, 180] -> 100..400, span 300 uses the 25 MB step."""
        assert memory_axis(values(120, 340, 180)) == AxisRange(100, 400, 25)

    def test_floor_never_below_zero(self) -> None:
        axis = memory_axis(values(10, 30))

        assert axis.min == 0
        assert axis.max == 100
        assert axis.step == 10

    def test_wide_span_uses_fifty_step(self) -> None:
        assert memory_axis(values(100, 900)) == AxisRange(100, 950, 50)

    def test_exact_multiple_still_gets_headroom(self) -> None:
        axis = memory_axis(values(200))

        assert axis == AxisRange(200, 250, 10)

    def test_missing_values_are_excluded(self) -> None:
        axis = memory_axis([MISSING, Present(120), MISSING, Present(340)])

        assert axis == AxisRange(100, 400, 25)

    def test_all_missing_raises(self) -> None:
        with pytest.raises(ValueError, match="memory"):
            memory_axis([MISSING, MISSING])

    def test_fractional_values(self) -> None:
        assert memory_axis(values(149.9, 150.1)) == AxisRange(100, 250, 25)


@pytest.mark.core
@pytest.mark.tier(0)
class TestMemoryStep:
    """Tests for memory_step() bucket boundaries."""

    @pytest.mark.parametrize(
        ("span", "step"),
        [(50, 10), (100, 10), (101, 25), (300, 25), (301, 50), (1000, 50)],
    )
    def test_inclusive_boundaries(self, span: int, step: int) -> None:
        assert memory_step(span) == step


@pytest.mark.core
@pytest.mark.tier(0)
class TestDiskAxis:
    """Tests for disk_axis()."""

    def test_low_usage_keeps_full_percent_view(self) -> None:
        assert disk_axis(values(12, 45, 8)) == AxisRange(0, 100, 5)

    def test_expands_past_hundred(self) -> None:
        assert disk_axis(values(50, 101)) == AxisRange(0, 105, 5)

    def test_exactly_hundred(self) -> None:
        assert disk_axis(values(100)) == AxisRange(0, 100, 5)

    def test_missing_values_are_excluded(self) -> None:
        assert disk_axis([MISSING, Present(14)]) == AxisRange(0, 100, 5)

    def test_all_missing_raises(self) -> None:
        with pytest.raises(ValueError, match="disk"):
            disk_axis([MISSING])


@pytest.mark.core
@pytest.mark.tier(0)
def test_service_axis_is_fixed_zero_to_one() -> None:
    assert SERVICE_AXIS == AxisRange(0, 1, 1)
