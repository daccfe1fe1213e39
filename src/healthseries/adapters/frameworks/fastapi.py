"""FastAPI adapter for the dashboard endpoints."""

from datetime import date

from fastapi import APIRouter, Query, Response
from fastapi.responses import JSONResponse

from healthseries.adapters.frameworks.query_params import _parse_level_param
from healthseries.adapters.logging import get_logger
from healthseries.core.encoding.dashboard import encode_dashboard
from healthseries.core.encoding.ndjson import encode_logs
from healthseries.core.exceptions import InvalidRange, NoDataInRange
from healthseries.runtime import DashboardRuntime

logger = get_logger(__name__)


def create_dashboard_router(runtime: DashboardRuntime) -> APIRouter:
    """Create a FastAPI router with /api/series and /logs endpoints.

    Args:
        runtime: Wired dashboard components.

    Returns:
        APIRouter with the dashboard endpoints configured.
    """
    router = APIRouter()

    @router.get("/api/series")
    async def get_series(
        start: date | None = Query(default=None),
        end: date | None = Query(default=None),
    ) -> JSONResponse:
        """Return the assembled series, summary, axes and chart payloads.

        Args:
            start: First day (ISO). Defaults to the configured start.
            end: Last day (ISO). Defaults to the configured end.
        """
        try:
            view = await runtime.load(start, end)
        except InvalidRange as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        except NoDataInRange as e:
            return JSONResponse(
                status_code=404,
                content={"error": runtime.indicator.message or str(e)},
            )
        except Exception:
            logger.exception("Error loading dashboard series")
            return JSONResponse(
                status_code=500, content={"error": "Internal Server Error"}
            )
        return JSONResponse(content=encode_dashboard(view))

    @router.get("/logs")
    async def get_logs(
        since: float = Query(default=0),
        level: str | None = Query(default=None),
    ) -> Response:
        """Return diagnostics in NDJSON format.

        Args:
            since: Unix timestamp. Returns entries with timestamp > since.
            level: Optional level filter; unknown levels are ignored.
        """
        level = _parse_level_param({"level": [level]} if level else {})
        body = await encode_logs(runtime.log_storage.read(since=since, level=level))
        return Response(content=body, media_type="application/x-ndjson")

    return router
