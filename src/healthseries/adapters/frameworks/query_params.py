"""Shared query parameter parsing utilities for framework adapters.

This module provides utilities for parsing and validating query parameters
that are common across the ASGI and FastAPI adapters.
"""

from datetime import date

from healthseries.core.dates import parse_date

# Valid log levels for validation
VALID_LEVELS = {"DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"}


def _first(params: dict[str, list[str]], name: str) -> str | None:
    values = params.get(name) or [None]
    return values[0]


def _parse_since_param(params: dict[str, list[str]]) -> float:
    """Parse and validate the 'since' query parameter.

    Args:
        params: Parsed query string parameters (as returned by urllib.parse.parse_qs).

    Returns:
        Timestamp as float, defaulting to 0.0 if invalid or missing.
        Rejects negative, NaN, and infinite values, returning 0.0 for these cases.
    """
    try:
        value = float(_first(params, "since") or "0")
    except ValueError:
        return 0.0
    if value < 0 or value != value or value in (float("inf"), float("-inf")):
        return 0.0
    return value


def _parse_level_param(params: dict[str, list[str]]) -> str | None:
    """Parse and validate the 'level' query parameter.

    Returns:
        Validated level string (uppercase, WARNING folded to WARN) or None
        if invalid/missing.
    """
    level_raw = _first(params, "level")
    if not level_raw or level_raw.upper() not in VALID_LEVELS:
        return None
    level = level_raw.upper()
    return "WARN" if level == "WARNING" else level


def _parse_date_param(
    params: dict[str, list[str]], name: str, default: date
) -> date:
    """Parse an ISO date query parameter.

    Returns:
        The parsed date, or default if the parameter is missing.

    Raises:
        ValueError: If the parameter is present but not a valid ISO date.
    """
    raw = _first(params, name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse_date(raw)
    except ValueError as e:
        raise ValueError(f"invalid '{name}' date: {raw!r}") from e
