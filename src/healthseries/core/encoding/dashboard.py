"""JSON-ready encoding of dashboard views.

Missing values become null; the renderer shows them as gaps.
"""

from typing import Any

from healthseries.core.charts import ChartData
from healthseries.core.dashboard import DashboardView
from healthseries.core.models import AxisRange, DailyRecord, Present, Value


def encode_value(value: Value) -> float | None:
    if isinstance(value, Present):
        return value.value
    return None


def encode_axis(axis: AxisRange | None) -> dict[str, float] | None:
    if axis is None:
        return None
    return {"min": axis.min, "max": axis.max, "step": axis.step}


def encode_record(record: DailyRecord) -> dict[str, Any]:
    return {
        "date": record.date.isoformat(),
        "used_memory_mb": encode_value(record.used_memory_mb),
        "disk_usage_percent": encode_value(record.disk_usage_percent),
        "services": {name: state.value for name, state in record.services.items()},
    }


def encode_chart(chart: ChartData) -> dict[str, Any]:
    return {
        "metric": chart.metric,
        "title": chart.title,
        "labels": list(chart.labels),
        "datasets": [
            {"label": ds.label, "data": [encode_value(v) for v in ds.values]}
            for ds in chart.datasets
        ],
        "axis": encode_axis(chart.axis),
    }


def encode_dashboard(view: DashboardView) -> dict[str, Any]:
    """Encode a DashboardView as a JSON-serializable dict.

    Returns:
        Dict with "summary", "message", "records", "axes" and "charts".
    """
    return {
        "summary": {
            "count": view.summary.count,
            "first_date": view.summary.first_date.isoformat(),
            "last_date": view.summary.last_date.isoformat(),
        },
        "message": view.message,
        "records": [encode_record(r) for r in view.series],
        "axes": {chart.metric: encode_axis(chart.axis) for chart in view.charts},
        "charts": [encode_chart(chart) for chart in view.charts],
    }
