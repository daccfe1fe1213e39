"""healthseries - daily health-check snapshots assembled into chart-ready series."""

from healthseries.adapters.logging import DiagnosticsHandler, get_logger
from healthseries.adapters.sources import (
    DirectorySnapshotSource,
    HttpSnapshotSource,
    InMemorySnapshotSource,
)
from healthseries.adapters.storage import InMemoryLogStorage, RingBufferLogStorage
from healthseries.config import DashboardConfig
from healthseries.core.assembler import AssemblyResult, SeriesAssembler
from healthseries.core.axis import SERVICE_AXIS, disk_axis, memory_axis
from healthseries.core.charts import ChartData, RenderSession, build_charts
from healthseries.core.dashboard import (
    DashboardView,
    StatusIndicator,
    load_dashboard,
    summary_message,
)
from healthseries.core.dates import DateRange, format_date, snapshot_name
from healthseries.core.exceptions import (
    HealthSeriesError,
    InvalidRange,
    MalformedSnapshot,
    NoDataInRange,
)
from healthseries.core.models import (
    MISSING,
    AxisRange,
    DailyRecord,
    Missing,
    Present,
    Series,
    SeriesSummary,
    ServiceState,
)
from healthseries.core.normalize import normalize
from healthseries.core.outcomes import Found, NotFound, TransportError
from healthseries.runtime import DashboardRuntime

__all__ = [
    "MISSING",
    "SERVICE_AXIS",
    "AssemblyResult",
    "AxisRange",
    "ChartData",
    "DailyRecord",
    "DashboardConfig",
    "DashboardRuntime",
    "DashboardView",
    "DateRange",
    "DiagnosticsHandler",
    "DirectorySnapshotSource",
    "Found",
    "HealthSeriesError",
    "HttpSnapshotSource",
    "InMemoryLogStorage",
    "InMemorySnapshotSource",
    "InvalidRange",
    "MalformedSnapshot",
    "Missing",
    "NoDataInRange",
    "NotFound",
    "Present",
    "RenderSession",
    "RingBufferLogStorage",
    "Series",
    "SeriesAssembler",
    "SeriesSummary",
    "ServiceState",
    "StatusIndicator",
    "TransportError",
    "build_charts",
    "disk_axis",
    "format_date",
    "get_logger",
    "load_dashboard",
    "memory_axis",
    "normalize",
    "snapshot_name",
    "summary_message",
]
