"""Shared test fixtures for all test modules."""

from collections.abc import AsyncGenerator
from datetime import date

import httpx
import pytest

from healthseries.adapters.sources.in_memory import InMemorySnapshotSource
from healthseries.adapters.storage.in_memory import InMemoryLogStorage
from healthseries.config import DashboardConfig
from healthseries.runtime import DashboardRuntime
from tests.snapshot_helpers import make_snapshot


@pytest.fixture
def snapshot_factory():
    """Factory fixture returning make_snapshot."""
    return make_snapshot


@pytest.fixture
def log_storage() -> InMemoryLogStorage:
    """Fixture providing an empty diagnostics storage."""
    return InMemoryLogStorage()


@pytest.fixture
def week_source() -> InMemorySnapshotSource:
    """Source with snapshots for 2025-02-01..2025-02-07 except the 3rd and 5th."""
    return InMemorySnapshotSource(
        {
            date(2025, 2, day): make_snapshot(used_mb=100 + day * 10)
            for day in (1, 2, 4, 6, 7)
        }
    )


@pytest.fixture
def week_config() -> DashboardConfig:
    return DashboardConfig(start=date(2025, 2, 1), end=date(2025, 2, 7))


@pytest.fixture
async def runtime(
    week_config: DashboardConfig,
    week_source: InMemorySnapshotSource,
    log_storage: InMemoryLogStorage,
) -> AsyncGenerator[DashboardRuntime]:
    """Runtime wired to the in-memory week source."""
    rt = DashboardRuntime(
        week_config, source=week_source, log_storage=log_storage
    )
    yield rt
    await rt.aclose()


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            async with asgi_test_client(app) as client:
                response = await client.get("/endpoint")
    """

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
