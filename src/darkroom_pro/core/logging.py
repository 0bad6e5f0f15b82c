"""
Logging for DarkroomPro.

Everything logs under the ``darkroom_pro`` logger. Calculations attach the
film and developer keys through LogContext, and JSONFormatter writes them
into every record emitted inside that scope.

Usage:
    from darkroom_pro.core.logging import LogContext, get_logger

    logger = get_logger(__name__)
    with LogContext(film_key="tri-x-400"):
        logger.info("Calculating")
"""

import copy
import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from darkroom_pro.config import get_settings

PACKAGE_LOGGER = "darkroom_pro"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
# ColoredFormatter pads the level name itself
COLORED_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Record attributes passed through ``extra=`` that JSON output keeps
_EXTRA_FIELDS = (
    "film_key",
    "developer_key",
    "operation",
    "duration_seconds",
    "error",
    "error_type",
    "film_count",
    "developer_count",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including the active LogContext."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = _log_context.get()
        if context:
            entry["context"] = context

        entry.update(
            {attr: getattr(record, attr) for attr in _EXTRA_FIELDS if hasattr(record, attr)}
        )

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class ColoredFormatter(logging.Formatter):
    """Text formatter that colors the level name for terminals."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers receive the same record
        record = copy.copy(record)
        color = self.COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname:8}{self.RESET}"
        return super().format(record)


_logging_configured = False


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    json_format: bool = False,
    colored: bool = True,
) -> None:
    """Attach handlers to the package logger, replacing earlier ones.

    Args:
        level: Level name; defaults to the configured ``log_level``.
        log_file: Also write JSON records to this file.
        json_format: Write JSON to stdout instead of text.
        colored: Color text output when stdout is a terminal.
    """
    global _logging_configured

    level = level or get_settings().log_level

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())
    package_logger.handlers.clear()

    if json_format:
        console_formatter: logging.Formatter = JSONFormatter()
    elif colored and sys.stdout.isatty():
        console_formatter = ColoredFormatter(COLORED_FORMAT, datefmt="%H:%M:%S")
    else:
        console_formatter = logging.Formatter(TEXT_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(console_formatter)
    package_logger.addHandler(console)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` under the package logger, configuring on first use."""
    if not _logging_configured:
        setup_logging()

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)


class LogContext:
    """Add key/value context to every record logged inside the block.

    Nested contexts merge; leaving a block restores the outer context.
    """

    def __init__(self, **context: Any):
        self.context = context
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = _log_context.set({**_log_context.get(), **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)


def get_log_context() -> dict[str, Any]:
    """Copy of the context active in the current scope."""
    return dict(_log_context.get())


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO,
) -> Iterator[None]:
    """Log start and completion of ``operation`` with its duration.

    A failure is logged at WARNING with the error type and re-raised.
    """
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}", extra={"operation": operation})
    try:
        yield
    except Exception as e:
        logger.warning(
            f"Failed: {operation}: {e}",
            extra={
                "operation": operation,
                "duration_seconds": round(time.perf_counter() - start, 4),
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
        raise
    logger.log(
        level,
        f"Completed: {operation}",
        extra={"operation": operation, "duration_seconds": round(time.perf_counter() - start, 4)},
    )
