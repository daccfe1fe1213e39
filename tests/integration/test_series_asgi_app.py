"""Integration tests for the generic ASGI dashboard app."""

import json
from datetime import date

import pytest

from healthseries.adapters.frameworks.asgi import create_asgi_app
from healthseries.adapters.sources.in_memory import InMemorySnapshotSource
from healthseries.core.dashboard import IndicatorState
from healthseries.core.logs import warn
from healthseries.runtime import DashboardRuntime

pytestmark = [pytest.mark.asgi, pytest.mark.integration, pytest.mark.tier(2)]


class TestSeriesEndpoint:
    async def test_returns_assembled_dashboard(self, runtime, asgi_test_client) -> None:
        async with asgi_test_client(create_asgi_app(runtime)) as client:
            response = await client.get(
                "/api/series", params={"start": "2025-02-01", "end": "2025-02-07"}
            )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        payload = response.json()
        assert payload["message"] == "Loaded 5 records (2025-02-01 to 2025-02-07)"
        assert [r["date"] for r in payload["records"]] == [
            "2025-02-01",
            "2025-02-02",
            "2025-02-04",
            "2025-02-06",
            "2025-02-07",
        ]
        assert payload["axes"]["memory"] == {"min": 100, "max": 250, "step": 25}
        assert payload["axes"]["disk"] == {"min": 0, "max": 100, "step": 5}

    async def test_defaults_to_configured_range(
        self, runtime, asgi_test_client
    ) -> None:
        async with asgi_test_client(create_asgi_app(runtime)) as client:
            response = await client.get("/api/series")

        assert response.status_code == 200
        assert response.json()["summary"]["count"] == 5

    async def test_inverted_range_is_400_without_fetching(
        self, runtime, week_source, asgi_test_client
    ) -> None:
        async with asgi_test_client(create_asgi_app(runtime)) as client:
            response = await client.get(
                "/api/series", params={"start": "2025-02-07", "end": "2025-02-01"}
            )

        assert response.status_code == 400
        assert "after" in response.json()["error"]
        assert week_source.requested == []

    async def test_unparsable_date_is_400(self, runtime, asgi_test_client) -> None:
        async with asgi_test_client(create_asgi_app(runtime)) as client:
            response = await client.get("/api/series", params={"end": "soon"})

        assert response.status_code == 400
        assert "'end'" in response.json()["error"]

    async def test_empty_range_is_404_with_indicator_message(
        self, runtime, asgi_test_client
    ) -> None:
        async with asgi_test_client(create_asgi_app(runtime)) as client:
            response = await client.get(
                "/api/series", params={"start": "2025-03-01", "end": "2025-03-03"}
            )

        assert response.status_code == 404
        assert response.json()["error"].startswith("Failed to load data: ")
        assert runtime.indicator.state is IndicatorState.ERROR

    async def test_unexpected_failure_is_500(self, log_storage, asgi_test_client):
        class ExplodingAssembler:
            async def assemble(self, start: date, end: date):
                raise RuntimeError("boom")

        rt = DashboardRuntime(
            source=InMemorySnapshotSource(),
            log_storage=log_storage,
            capture_logging=False,
        )
        rt.assembler = ExplodingAssembler()

        async with asgi_test_client(create_asgi_app(rt)) as client:
            response = await client.get("/api/series")

        await rt.aclose()
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


class TestLogsEndpoint:
    async def test_returns_assembly_diagnostics_as_ndjson(
        self, runtime, asgi_test_client
    ) -> None:
        async with asgi_test_client(create_asgi_app(runtime)) as client:
            await client.get("/api/series")
            response = await client.get("/logs")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/x-ndjson"
        messages = [json.loads(line)["message"] for line in response.text.splitlines()]
        assert "Loading snapshots" in messages
        assert "Loaded snapshots" in messages

    async def test_level_filter(self, runtime, log_storage, asgi_test_client) -> None:
        await log_storage.write(warn("Failed to load snapshot", snapshot="x.json"))

        async with asgi_test_client(create_asgi_app(runtime)) as client:
            response = await client.get("/logs", params={"level": "warning"})

        lines = [json.loads(line) for line in response.text.splitlines()]
        assert [entry["level"] for entry in lines] == ["WARN"]
        assert lines[0]["attributes"] == {"snapshot": "x.json"}

    async def test_empty_storage_returns_empty_body(
        self, runtime, asgi_test_client
    ) -> None:
        async with asgi_test_client(create_asgi_app(runtime)) as client:
            response = await client.get("/logs")

        assert response.status_code == 200
        assert response.text == ""


async def test_unknown_path_is_404(runtime, asgi_test_client) -> None:
    async with asgi_test_client(create_asgi_app(runtime)) as client:
        response = await client.get("/metrics")

    assert response.status_code == 404
    assert response.text == "Not Found"
