"""HTTP snapshot source backed by httpx."""

from datetime import date

import httpx

from healthseries.adapters.logging import get_logger
from healthseries.core.dates import snapshot_name
from healthseries.core.exceptions import MalformedSnapshot
from healthseries.core.normalize import parse_snapshot
from healthseries.core.outcomes import FetchOutcome, Found, NotFound, TransportError

logger = get_logger(__name__)

DEFAULT_BASE_PATH = "src/"


class HttpSnapshotSource:
    """Fetches health-check-YYYY-MM-DD.json files over HTTP.

    Any non-success status counts as NotFound. Network errors, timeouts
    and unparsable bodies become TransportError.

    Args:
        base_url: Server root, e.g. "http://localhost:8000/".
        base_path: Directory of the snapshot files relative to base_url.
        timeout: Per-request timeout in seconds.
        client: Optional preconfigured AsyncClient. When given, its
            base_url and timeout are used as-is and it is not closed by
            this source.

    Raises:
        ValueError: If neither base_url nor client is given.
    """

    def __init__(
        self,
        base_url: str | None = None,
        base_path: str = DEFAULT_BASE_PATH,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if client is None and not base_url:
            raise ValueError("base_url is required when no client is given")
        if base_path and not base_path.endswith("/"):
            base_path += "/"
        self._base_path = base_path
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or "", timeout=timeout
        )

    def url_for(self, day: date) -> str:
        """Request path for day, relative to the client's base_url."""
        return f"{self._base_path}{snapshot_name(day)}"

    async def fetch(self, day: date) -> FetchOutcome:
        url = self.url_for(day)
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            logger.debug("Timed out fetching %s: %s", url, e)
            return TransportError(day, f"timed out: {e}", "timeout")
        except httpx.HTTPError as e:
            logger.debug("Error fetching %s: %s", url, e)
            return TransportError(day, f"{type(e).__name__}: {e}")

        if not response.is_success:
            logger.debug("Snapshot not found: %s (HTTP %d)", url, response.status_code)
            return NotFound(day)

        try:
            snapshot = parse_snapshot(response.content)
        except MalformedSnapshot as e:
            logger.debug("Malformed snapshot %s: %s", url, e)
            return TransportError(day, str(e), "malformed")
        return Found(day, snapshot)

    async def aclose(self) -> None:
        """Close the underlying client if this source created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpSnapshotSource":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
