"""Builders for the diagnostic entries the assembler records."""

import time

from healthseries.core.models import LogEntry

Attribute = str | int | float | bool


def log(level: str, message: str, **attributes: Attribute) -> LogEntry:
    """Diagnostic entry stamped with the current wall-clock time.

    Keyword arguments become the entry's attributes, e.g.
    ``log("WARN", "Failed to load snapshot", snapshot=name, reason="timeout")``.
    """
    return LogEntry(time.time(), level, message, dict(attributes))


def debug(message: str, **attributes: Attribute) -> LogEntry:
    return log("DEBUG", message, **attributes)


def info(message: str, **attributes: Attribute) -> LogEntry:
    return log("INFO", message, **attributes)


def warn(message: str, **attributes: Attribute) -> LogEntry:
    return log("WARN", message, **attributes)
