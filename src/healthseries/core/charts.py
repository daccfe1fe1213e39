"""Chart payloads handed to the rendering collaborator.

The core decides what each chart shows (labels, values, axis); the
renderer decides how it looks.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from healthseries.core.axis import SERVICE_AXIS, disk_axis, memory_axis
from healthseries.core.models import (
    DEFAULT_SERVICES,
    AxisRange,
    DailyRecord,
    Present,
    Series,
    ServiceSpec,
    ServiceState,
    Value,
    present_values,
)
from healthseries.core.ports import ChartRendererPort

MEMORY = "memory"
DISK = "disk"
SERVICES = "services"
METRICS = (MEMORY, DISK, SERVICES)
ALL = "all"


@dataclass(frozen=True)
class Dataset:
    """One line on a chart."""

    label: str
    values: tuple[Value, ...]


@dataclass(frozen=True)
class ChartData:
    """Everything the renderer needs to draw one chart.

    Attributes:
        metric: "memory", "disk" or "services".
        title: Axis title.
        labels: ISO date string per point.
        datasets: Lines to draw.
        axis: Y-axis range, or None if the metric has no values at all.
    """

    metric: str
    title: str
    labels: tuple[str, ...]
    datasets: tuple[Dataset, ...]
    axis: AxisRange | None


def _axis_or_none(values: tuple[Value, ...], compute) -> AxisRange | None:
    if not present_values(values):
        return None
    return compute(values)


def build_memory_chart(series: Series) -> ChartData:
    values = tuple(r.used_memory_mb for r in series)
    return ChartData(
        metric=MEMORY,
        title="Memory usage (MB)",
        labels=tuple(d.isoformat() for d in series.dates),
        datasets=(Dataset(label="Memory usage (MB)", values=values),),
        axis=_axis_or_none(values, memory_axis),
    )


def build_disk_chart(series: Series) -> ChartData:
    values = tuple(r.disk_usage_percent for r in series)
    return ChartData(
        metric=DISK,
        title="Disk usage (%)",
        labels=tuple(d.isoformat() for d in series.dates),
        datasets=(Dataset(label="Disk usage (%)", values=values),),
        axis=_axis_or_none(values, disk_axis),
    )


def _state(record: DailyRecord, name: str) -> ServiceState:
    return record.services.get(name, ServiceState.INACTIVE)


def build_services_chart(
    series: Series, services: Iterable[ServiceSpec] = DEFAULT_SERVICES
) -> ChartData:
    """Services chart: one stepped line per service, 1 active and 0 inactive."""
    datasets = tuple(
        Dataset(
            label=service.label,
            values=tuple(
                Present(float(_state(r, service.name).as_number)) for r in series
            ),
        )
        for service in services
    )
    return ChartData(
        metric=SERVICES,
        title="Service status",
        labels=tuple(d.isoformat() for d in series.dates),
        datasets=datasets,
        axis=SERVICE_AXIS,
    )


def build_charts(
    series: Series, services: Iterable[ServiceSpec] = DEFAULT_SERVICES
) -> list[ChartData]:
    """Build the memory, disk and services charts, in that order."""
    return [
        build_memory_chart(series),
        build_disk_chart(series),
        build_services_chart(series, services),
    ]


def visible_metrics(selection: str) -> tuple[str, ...]:
    """Metrics to show for a chart selector value.

    Args:
        selection: "all" or one of "memory", "disk", "services".

    Raises:
        ValueError: For any other selection.
    """
    if selection == ALL:
        return METRICS
    if selection in METRICS:
        return (selection,)
    raise ValueError(f"unknown chart selection: {selection!r}")


class RenderSession:
    """Holds the currently drawn chart instance for each metric.

    Owned by the UI layer. Replacing a chart disposes the previous
    instance for that metric before drawing the new one.

    Args:
        renderer: Adapter implementing ChartRendererPort.
    """

    def __init__(self, renderer: ChartRendererPort) -> None:
        self._renderer = renderer
        self._instances: dict[str, Any] = {}

    def replace(self, chart: ChartData) -> Any:
        """Dispose the old instance for chart.metric and render chart."""
        old = self._instances.pop(chart.metric, None)
        if old is not None:
            self._renderer.dispose(old)
        handle = self._renderer.render(chart)
        self._instances[chart.metric] = handle
        return handle

    def replace_all(self, charts: Iterable[ChartData]) -> dict[str, Any]:
        return {chart.metric: self.replace(chart) for chart in charts}

    def current(self, metric: str) -> Any:
        return self._instances.get(metric)

    def close(self) -> None:
        """Dispose every drawn instance."""
        for handle in self._instances.values():
            self._renderer.dispose(handle)
        self._instances.clear()
