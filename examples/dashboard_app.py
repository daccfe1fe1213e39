"""Example FastAPI application serving the health-check dashboard data.

Run with:
    uvicorn examples.dashboard_app:app --reload

Configuration comes from HEALTHSERIES_* environment variables (or a .env
file), e.g. HEALTHSERIES_SNAPSHOT_DIR=./src to read local snapshot files.

Endpoints:
    /api/series                         - Series, summary, axes and charts
    /api/series?start=<d>&end=<d>       - Same, for another ISO date range
    /logs                               - NDJSON diagnostics
    /logs?level=WARN                    - Only failed fetches
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from healthseries.adapters.frameworks.fastapi import create_dashboard_router
from healthseries.config import DashboardConfig
from healthseries.runtime import DashboardRuntime

runtime = DashboardRuntime(DashboardConfig.from_env())


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Close the snapshot source on shutdown."""
    yield
    await runtime.aclose()


app = FastAPI(title="Health Check Dashboard", lifespan=lifespan)
app.include_router(create_dashboard_router(runtime))
