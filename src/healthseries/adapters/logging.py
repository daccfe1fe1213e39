"""Python logging handler adapter for healthseries.

This adapter bridges Python's standard library logging module to the
LogStoragePort, so library logs land next to the assembler's per-day
diagnostics.
"""

import asyncio
import logging
import traceback

from healthseries.core.models import LogEntry
from healthseries.core.ports import LogStoragePort

ROOT_LOGGER_NAME = "healthseries"

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# stdlib level names mapped onto the diagnostic level vocabulary
_LEVEL_NAMES = {"WARNING": "WARN"}


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger under the healthseries namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class DiagnosticsHandler(logging.Handler):
    """Logging handler that writes log records to a LogStoragePort.

    Inside a running event loop the write is scheduled as a task;
    otherwise it runs to completion before emit() returns.

    Example:
        ```python
        from healthseries import DiagnosticsHandler, InMemoryLogStorage

        storage = InMemoryLogStorage()
        logging.getLogger("healthseries").addHandler(DiagnosticsHandler(storage))
        ```
    """

    def __init__(self, storage: LogStoragePort, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._storage = storage
        self._pending: set[asyncio.Task[None]] = set()

    def _to_entry(self, record: logging.LogRecord) -> LogEntry:
        attributes: dict[str, str | int | float | bool] = {
            "module": record.name,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                attributes[key] = value

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attributes["exc_type"] = exc_type.__name__
            if exc_value is not None:
                attributes["exc_message"] = str(exc_value)
            if exc_tb is not None:
                attributes["exc_traceback"] = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )

        return LogEntry(
            timestamp=record.created,
            level=_LEVEL_NAMES.get(record.levelname, record.levelname),
            message=record.getMessage(),
            attributes=attributes,
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to the storage backend."""
        try:
            entry = self._to_entry(record)
        except Exception:
            self.handleError(record)
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._storage.write(entry))
            return

        task = loop.create_task(self._storage.write(entry))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)


def attach_diagnostics(
    storage: LogStoragePort, level: int = logging.INFO
) -> DiagnosticsHandler:
    """Route healthseries stdlib logging into storage.

    Returns:
        The installed handler, for later removal.
    """
    handler = DiagnosticsHandler(storage)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler
