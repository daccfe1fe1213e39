"""Outcomes of fetching one day's snapshot.

Every fetch resolves to exactly one of these. Only ``Found`` carries data;
the assembler skips the other two.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Literal

RawSnapshot = dict[str, Any]

TransportReason = Literal["transport", "timeout", "malformed"]


@dataclass(frozen=True)
class Found:
    """The snapshot exists and was parsed."""

    day: date
    snapshot: RawSnapshot


@dataclass(frozen=True)
class NotFound:
    """No snapshot exists for the day. Expected for gaps in the range."""

    day: date


@dataclass(frozen=True)
class TransportError:
    """The snapshot could not be read or parsed.

    Attributes:
        day: The day that was requested.
        detail: Human-readable description for diagnostics.
        reason: "transport", "timeout" or "malformed".
    """

    day: date
    detail: str
    reason: TransportReason = "transport"


FetchOutcome = Found | NotFound | TransportError
