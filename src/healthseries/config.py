"""Dashboard configuration.

Values come from keyword arguments or from HEALTHSERIES_* environment
variables (a .env file in the working directory is loaded first).
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from healthseries.core.assembler import DEFAULT_FETCH_TIMEOUT_SECONDS
from healthseries.core.dates import DEFAULT_DATE_FORMAT, parse_date
from healthseries.core.exceptions import InvalidRange
from healthseries.core.models import DEFAULT_SERVICES, ServiceSpec

ENV_PREFIX = "HEALTHSERIES_"


@dataclass(frozen=True)
class DashboardConfig:
    """Settings for loading and serving the dashboard.

    Attributes:
        start: First day of the range (inclusive).
        end: Last day of the range (inclusive).
        base_url: Server root the snapshots are fetched from.
        base_path: Snapshot directory relative to base_url.
        snapshot_dir: Read snapshots from this local directory instead of HTTP.
        fetch_timeout: Seconds allowed per snapshot fetch.
        max_concurrency: Fetches in flight; 1 means sequential.
        log_buffer_size: Diagnostic entries kept in memory.
        date_format: strftime pattern for the summary message.
        services: Service name to raw field mapping.
    """

    start: date = date(2025, 1, 31)
    end: date = date(2025, 3, 7)
    base_url: str = "http://localhost:8000/"
    base_path: str = "src/"
    snapshot_dir: Path | None = None
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    max_concurrency: int = 1
    log_buffer_size: int = 1000
    date_format: str = DEFAULT_DATE_FORMAT
    services: tuple[ServiceSpec, ...] = field(default=DEFAULT_SERVICES)

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRange(self.start.isoformat(), self.end.isoformat())
        if self.fetch_timeout <= 0:
            raise ValueError("fetch_timeout must be positive")
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        if self.log_buffer_size < 1:
            raise ValueError("log_buffer_size must be at least 1")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        dotenv_path: str | Path | None = None,
    ) -> "DashboardConfig":
        """Build a config from HEALTHSERIES_* variables.

        Args:
            environ: Variables to read. Defaults to os.environ after
                loading .env (or dotenv_path).
            dotenv_path: Explicit .env file to load.

        Raises:
            ValueError: If a variable has an invalid value.
        """
        if environ is None:
            load_dotenv(dotenv_path)
            environ = os.environ

        def get(name: str) -> str | None:
            value = environ.get(ENV_PREFIX + name)
            return value.strip() if value is not None and value.strip() else None

        kwargs: dict[str, object] = {}
        if (value := get("START")) is not None:
            kwargs["start"] = parse_date(value)
        if (value := get("END")) is not None:
            kwargs["end"] = parse_date(value)
        if (value := get("BASE_URL")) is not None:
            kwargs["base_url"] = value
        if (value := get("BASE_PATH")) is not None:
            kwargs["base_path"] = value
        if (value := get("SNAPSHOT_DIR")) is not None:
            kwargs["snapshot_dir"] = Path(value)
        if (value := get("FETCH_TIMEOUT")) is not None:
            kwargs["fetch_timeout"] = float(value)
        if (value := get("MAX_CONCURRENCY")) is not None:
            kwargs["max_concurrency"] = int(value)
        if (value := get("LOG_BUFFER_SIZE")) is not None:
            kwargs["log_buffer_size"] = int(value)
        if (value := get("DATE_FORMAT")) is not None:
            kwargs["date_format"] = value
        return cls(**kwargs)  # type: ignore[arg-type]
