"""Top-level dashboard loading: indicator, summary and charts."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import Enum

from healthseries.core.assembler import SeriesAssembler
from healthseries.core.charts import ChartData, build_charts
from healthseries.core.dates import DEFAULT_DATE_FORMAT, format_date
from healthseries.core.exceptions import HealthSeriesError
from healthseries.core.models import (
    DEFAULT_SERVICES,
    Series,
    SeriesSummary,
    ServiceSpec,
)

LOADING_MESSAGE = "Loading data..."


class IndicatorState(Enum):
    HIDDEN = "hidden"
    LOADING = "loading"
    ERROR = "error"


class StatusIndicator:
    """Loading/error indicator shown by the UI layer.

    Only one of the two messages is visible at a time.
    """

    def __init__(self) -> None:
        self.state = IndicatorState.HIDDEN
        self.message = ""

    def show_loading(self, message: str = LOADING_MESSAGE) -> None:
        self.state = IndicatorState.LOADING
        self.message = message

    def show_error(self, message: str) -> None:
        self.state = IndicatorState.ERROR
        self.message = message

    def hide(self) -> None:
        self.state = IndicatorState.HIDDEN
        self.message = ""


def summary_message(
    summary: SeriesSummary, date_format: str = DEFAULT_DATE_FORMAT
) -> str:
    """Human-readable record count and date span."""
    first = format_date(summary.first_date, date_format)
    last = format_date(summary.last_date, date_format)
    return f"Loaded {summary.count} records ({first} to {last})"


@dataclass(frozen=True)
class DashboardView:
    """A successfully loaded dashboard."""

    series: Series
    summary: SeriesSummary
    message: str
    charts: list[ChartData]


async def load_dashboard(
    assembler: SeriesAssembler,
    start: date,
    end: date,
    indicator: StatusIndicator | None = None,
    services: Iterable[ServiceSpec] = DEFAULT_SERVICES,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> DashboardView:
    """Assemble the series and prepare the summary and chart payloads.

    The indicator shows loading while assembling, then is hidden on
    success or switched to an error message on failure.

    Raises:
        InvalidRange: If start is after end.
        NoDataInRange: If nothing in the range could be loaded.
    """
    indicator = indicator or StatusIndicator()
    indicator.show_loading()
    try:
        result = await assembler.assemble(start, end)
    except HealthSeriesError as e:
        indicator.show_error(f"Failed to load data: {e}")
        raise
    view = DashboardView(
        series=result.series,
        summary=result.summary,
        message=summary_message(result.summary, date_format),
        charts=build_charts(result.series, services),
    )
    indicator.hide()
    return view
