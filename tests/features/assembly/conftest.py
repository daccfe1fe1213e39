"""BDD step definitions for series assembly features."""

import asyncio
from dataclasses import dataclass, field
from datetime import date

import pytest
from pytest_bdd import given, parsers, then, when

from healthseries.adapters.sources.in_memory import InMemorySnapshotSource
from healthseries.adapters.storage.in_memory import InMemoryLogStorage
from healthseries.core.assembler import AssemblyResult, SeriesAssembler
from healthseries.core.dashboard import summary_message
from healthseries.core.exceptions import HealthSeriesError
from healthseries.core.models import LogEntry
from healthseries.core.outcomes import TransportError
from tests.snapshot_helpers import make_snapshot


@dataclass
class AssemblyScenarioContext:
    source: InMemorySnapshotSource = field(default_factory=InMemorySnapshotSource)
    log_storage: InMemoryLogStorage = field(default_factory=InMemoryLogStorage)
    max_concurrency: int = 1
    result: AssemblyResult | None = None
    error: HealthSeriesError | None = None


def _days(raw: str) -> list[date]:
    return [date.fromisoformat(part.strip()) for part in raw.split(",")]


async def _read_logs(storage: InMemoryLogStorage) -> list[LogEntry]:
    return [entry async for entry in storage.read()]


@pytest.fixture
def ctx() -> AssemblyScenarioContext:
    """Fresh scenario context for each test."""
    return AssemblyScenarioContext()


# === Given ===
@given(parsers.parse('snapshots exist for days "{days}"'))
def step_snapshots_exist(ctx: AssemblyScenarioContext, days: str) -> None:
    for day in _days(days):
        ctx.source.put(day, make_snapshot(used_mb=100 + day.day))


@given(parsers.parse('the snapshot for "{day}" fails with "{detail}"'))
def step_snapshot_fails(ctx: AssemblyScenarioContext, day: str, detail: str) -> None:
    parsed = date.fromisoformat(day)
    ctx.source.put(parsed, TransportError(parsed, detail))


@given(parsers.parse("at most {n:d} fetches run at once"))
def step_concurrency(ctx: AssemblyScenarioContext, n: int) -> None:
    ctx.max_concurrency = n


# === When ===
@when(parsers.parse('the series for "{start}" to "{end}" is assembled'))
def step_assemble(ctx: AssemblyScenarioContext, start: str, end: str) -> None:
    assembler = SeriesAssembler(
        ctx.source,
        log_storage=ctx.log_storage,
        max_concurrency=ctx.max_concurrency,
    )
    try:
        ctx.result = asyncio.run(
            assembler.assemble(date.fromisoformat(start), date.fromisoformat(end))
        )
    except HealthSeriesError as e:
        ctx.error = e


# === Then ===
@then(parsers.parse('the series holds days "{days}"'))
def step_series_days(ctx: AssemblyScenarioContext, days: str) -> None:
    assert ctx.error is None
    assert ctx.result is not None
    assert ctx.result.series.dates == _days(days)


@then(parsers.parse('the summary reads "{message}"'))
def step_summary(ctx: AssemblyScenarioContext, message: str) -> None:
    assert ctx.result is not None
    assert summary_message(ctx.result.summary) == message


@then(parsers.parse('a "{level}" diagnostic mentions "{name}"'))
def step_diagnostic(ctx: AssemblyScenarioContext, level: str, name: str) -> None:
    logs = asyncio.run(_read_logs(ctx.log_storage))
    assert any(
        entry.level == level and entry.attributes.get("snapshot") == name
        for entry in logs
    )


@then(parsers.parse('assembly fails with "{message}"'))
def step_fails(ctx: AssemblyScenarioContext, message: str) -> None:
    assert ctx.result is None
    assert str(ctx.error) == message


@then("no snapshot was requested")
def step_nothing_requested(ctx: AssemblyScenarioContext) -> None:
    assert ctx.source.requested == []
