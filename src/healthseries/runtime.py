"""Wiring of config, snapshot source, diagnostics and assembler."""

from datetime import date

from healthseries.adapters.logging import attach_diagnostics, get_logger
from healthseries.adapters.sources.filesystem import DirectorySnapshotSource
from healthseries.adapters.sources.http import HttpSnapshotSource
from healthseries.adapters.storage.ring_buffer import RingBufferLogStorage
from healthseries.config import DashboardConfig
from healthseries.core.assembler import SeriesAssembler
from healthseries.core.dashboard import DashboardView, StatusIndicator, load_dashboard
from healthseries.core.ports import LogStoragePort, SnapshotSourcePort

logger = get_logger(__name__)


def create_source(config: DashboardConfig) -> SnapshotSourcePort:
    """Directory source when snapshot_dir is set, HTTP source otherwise."""
    if config.snapshot_dir is not None:
        return DirectorySnapshotSource(config.snapshot_dir)
    return HttpSnapshotSource(
        base_url=config.base_url,
        base_path=config.base_path,
        timeout=config.fetch_timeout,
    )


class DashboardRuntime:
    """Owns the components needed to load the dashboard.

    The series is rebuilt on every load; nothing is cached between loads.

    Args:
        config: Dashboard settings.
        source: Snapshot source; built from config when omitted.
        log_storage: Diagnostics storage; a ring buffer of
            config.log_buffer_size entries when omitted.
        capture_logging: Also route stdlib healthseries logs into
            log_storage.
    """

    def __init__(
        self,
        config: DashboardConfig | None = None,
        source: SnapshotSourcePort | None = None,
        log_storage: LogStoragePort | None = None,
        capture_logging: bool = True,
    ) -> None:
        self.config = config or DashboardConfig()
        self.source = source or create_source(self.config)
        self.log_storage = log_storage or RingBufferLogStorage(
            self.config.log_buffer_size
        )
        self.indicator = StatusIndicator()
        self.assembler = SeriesAssembler(
            self.source,
            log_storage=self.log_storage,
            services=self.config.services,
            max_concurrency=self.config.max_concurrency,
            fetch_timeout=self.config.fetch_timeout,
        )
        self._handler = attach_diagnostics(self.log_storage) if capture_logging else None

    async def load(
        self, start: date | None = None, end: date | None = None
    ) -> DashboardView:
        """Load the dashboard for [start, end], defaulting to the configured range.

        Raises:
            InvalidRange: If start is after end.
            NoDataInRange: If nothing in the range could be loaded.
        """
        start = start or self.config.start
        end = end or self.config.end
        logger.info("Loading dashboard for %s to %s", start, end)
        return await load_dashboard(
            self.assembler,
            start,
            end,
            indicator=self.indicator,
            services=self.config.services,
            date_format=self.config.date_format,
        )

    async def aclose(self) -> None:
        """Release the source's resources and detach logging capture."""
        if self._handler is not None:
            get_logger("healthseries").removeHandler(self._handler)
            self._handler = None
        aclose = getattr(self.source, "aclose", None)
        if aclose is not None:
            await aclose()
