"""Logging setup for schemadoc.

Modules log through ``logging.getLogger(__name__)``. Structured values are
passed as ``extra={"fields": {...}}`` and rendered by the formatters below.
:func:`configure_logging` attaches a single stderr handler to the
``schemadoc`` logger.

Usage:
    >>> configure_logging(level="debug", format="json")
    >>> logging.getLogger("schemadoc.driver").debug(
    ...     "Rendered field", extra={"fields": {"field": "#ReadFile"}}
    ... )
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Any, TextIO

from schemadoc.errors import ConfigurationError

ROOT_LOGGER = "schemadoc"


# =============================================================================
# Levels and Formats
# =============================================================================


class LogLevel(IntEnum):
    """Log severity levels."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Convert string to LogLevel.

        Raises:
            ConfigurationError: If *level* is not a known level name.
        """
        mapping = {
            "trace": cls.TRACE,
            "debug": cls.DEBUG,
            "info": cls.INFO,
            "warning": cls.WARNING,
            "warn": cls.WARNING,
            "error": cls.ERROR,
            "critical": cls.CRITICAL,
            "fatal": cls.CRITICAL,
        }
        try:
            return mapping[level.lower()]
        except KeyError:
            raise ConfigurationError(
                f"unknown log level: {level}",
                hint=f"Use one of: {', '.join(mapping)}",
            ) from None


class LogFormat(Enum):
    """Log output formats. AUTO uses CONSOLE on terminals, JSON otherwise."""

    AUTO = "auto"
    CONSOLE = "console"
    JSON = "json"

    @classmethod
    def parse(cls, value: "LogFormat | str") -> "LogFormat":
        if isinstance(value, cls):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise ConfigurationError(
                f"unknown log format: {value}",
                hint="Use one of: auto, console, json",
            ) from None


def _fields(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "fields", None) or {}


# =============================================================================
# Formatters
# =============================================================================


class JSONFormatter(logging.Formatter):
    """JSON log formatter.

    Example output:
        {"timestamp": "2024-01-15T10:30:00+00:00", "level": "debug", "message": "Discovered fields", ...}
    """

    def __init__(
        self,
        *,
        indent: int | None = None,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
    ) -> None:
        super().__init__()
        self._indent = indent
        self._sort_keys = sort_keys
        self._ensure_ascii = ensure_ascii

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
            **_fields(record),
        }
        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            data["exception"] = {
                "type": type(exc).__name__,
                "message": str(exc),
                "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__),
            }
        return json.dumps(
            data,
            indent=self._indent,
            sort_keys=self._sort_keys,
            ensure_ascii=self._ensure_ascii,
            default=str,
        )


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter.

    Example output:
        2024-01-15 10:30:00 DEBUG [schemadoc.driver] Discovered fields count=3
    """

    # ANSI color codes
    COLORS = {
        LogLevel.TRACE: "\033[90m",     # Gray
        LogLevel.DEBUG: "\033[36m",     # Cyan
        LogLevel.INFO: "\033[32m",      # Green
        LogLevel.WARNING: "\033[33m",   # Yellow
        LogLevel.ERROR: "\033[31m",     # Red
        LogLevel.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(
        self,
        *,
        color: bool = True,
        show_timestamp: bool = True,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
    ) -> None:
        super().__init__()
        self._color = color
        self._show_timestamp = show_timestamp
        self._timestamp_format = timestamp_format

    def format(self, record: logging.LogRecord) -> str:
        parts = []

        if self._show_timestamp:
            ts = datetime.fromtimestamp(record.created).strftime(self._timestamp_format)
            parts.append(ts)

        level = record.levelname.ljust(5)
        if self._color:
            color = self.COLORS.get(record.levelno, "")  # type: ignore[call-overload]
            level = f"{color}{level}{self.RESET}"
        parts.append(level)

        parts.append(f"[{record.name}]")
        parts.append(record.getMessage())

        fields = _fields(record)
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))

        result = " ".join(parts)
        if record.exc_info:
            result = f"{result}\n{self.formatException(record.exc_info)}"
        return result


# =============================================================================
# Configuration
# =============================================================================


def configure_logging(
    *,
    level: LogLevel | str = LogLevel.INFO,
    format: LogFormat | str = LogFormat.AUTO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``schemadoc`` logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        level: Minimum level to emit.
        format: Output format ("auto", "console", "json").
        stream: Destination. Defaults to stderr.

    Returns:
        The configured logger.

    Raises:
        ConfigurationError: If *level* or *format* is unknown.
    """
    if isinstance(level, str):
        level = LogLevel.from_string(level)
    log_format = LogFormat.parse(format)

    stream = stream or sys.stderr
    is_terminal = hasattr(stream, "isatty") and stream.isatty()
    if log_format is LogFormat.AUTO:
        log_format = LogFormat.CONSOLE if is_terminal else LogFormat.JSON

    formatter: logging.Formatter
    if log_format is LogFormat.JSON:
        formatter = JSONFormatter()
    else:
        formatter = ConsoleFormatter(color=is_terminal)

    logging.addLevelName(LogLevel.TRACE, "TRACE")

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_schemadoc", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    handler._schemadoc = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
