"""ASGI generic adapter for the dashboard endpoints.

This adapter provides a framework-agnostic ASGI application that can be used
with any ASGI server (uvicorn, hypercorn, daphne) without requiring FastAPI
as a dependency.
"""

import json
from collections.abc import Callable, Coroutine
from typing import Any
from urllib.parse import parse_qs

from healthseries.adapters.frameworks.query_params import (
    _parse_date_param,
    _parse_level_param,
    _parse_since_param,
)
from healthseries.adapters.logging import get_logger
from healthseries.core.encoding.dashboard import encode_dashboard
from healthseries.core.encoding.ndjson import encode_logs
from healthseries.core.exceptions import InvalidRange, NoDataInRange
from healthseries.runtime import DashboardRuntime

logger = get_logger(__name__)

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]


def _parse_query_params(scope: Scope) -> dict[str, list[str]]:
    """Parse query string from ASGI scope into parameter dictionary.

    Returns empty dict if query_string is missing or empty.
    """
    query_string = scope.get("query_string", b"").decode(errors="replace")
    return parse_qs(query_string)


async def _send_response(send: Send, status: int, content_type: str, body: str) -> None:
    """Send an HTTP response with headers and body."""
    headers = [(b"content-type", content_type.encode())]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body.encode()})


async def _send_error(send: Send, status: int, message: str) -> None:
    await _send_response(
        send, status, "application/json", json.dumps({"error": message})
    )


async def _handle_series(runtime: DashboardRuntime, scope: Scope, send: Send) -> None:
    """Serve the assembled dashboard as JSON, mapping pipeline errors to statuses."""
    params = _parse_query_params(scope)
    try:
        start = _parse_date_param(params, "start", runtime.config.start)
        end = _parse_date_param(params, "end", runtime.config.end)
    except ValueError as e:
        await _send_error(send, 400, str(e))
        return

    try:
        view = await runtime.load(start, end)
    except InvalidRange as e:
        await _send_error(send, 400, str(e))
        return
    except NoDataInRange as e:
        await _send_error(send, 404, runtime.indicator.message or str(e))
        return
    except Exception:
        logger.exception("Error loading dashboard series")
        await _send_error(send, 500, "Internal Server Error")
        return

    await _send_response(
        send, 200, "application/json", json.dumps(encode_dashboard(view))
    )


async def _handle_logs(runtime: DashboardRuntime, scope: Scope, send: Send) -> None:
    params = _parse_query_params(scope)
    since = _parse_since_param(params)
    level = _parse_level_param(params)
    try:
        body = await encode_logs(runtime.log_storage.read(since=since, level=level))
    except Exception:
        logger.exception("Error encoding logs endpoint")
        await _send_error(send, 500, "Internal Server Error")
        return
    await _send_response(send, 200, "application/x-ndjson", body)


def create_asgi_app(runtime: DashboardRuntime) -> ASGIApp:
    """Create an ASGI app with /api/series and /logs endpoints.

    Args:
        runtime: Wired dashboard components.

    Returns:
        ASGI application callable.
    """

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        path = scope["path"]
        if path == "/api/series":
            await _handle_series(runtime, scope, send)
        elif path == "/logs":
            await _handle_logs(runtime, scope, send)
        else:
            await _send_response(send, 404, "text/plain", "Not Found")

    return app
