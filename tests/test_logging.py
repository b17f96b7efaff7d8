"""Tests for logging setup."""

import io
import json
import logging

import pytest

from schemadoc.errors import ConfigurationError
from schemadoc.logging import (
    ROOT_LOGGER,
    ConsoleFormatter,
    JSONFormatter,
    LogFormat,
    LogLevel,
    configure_logging,
)


def _record(**kwargs) -> logging.LogRecord:
    attrs = {
        "name": "schemadoc.driver",
        "levelno": logging.DEBUG,
        "levelname": "DEBUG",
        "msg": "Discovered fields",
        "args": (),
    }
    attrs.update(kwargs)
    return logging.makeLogRecord(attrs)


class TestLogLevel:
    """Tests for LogLevel."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("debug", LogLevel.DEBUG),
            ("INFO", LogLevel.INFO),
            ("warn", LogLevel.WARNING),
            ("fatal", LogLevel.CRITICAL),
        ],
    )
    def test_from_string(self, name: str, expected: LogLevel) -> None:
        assert LogLevel.from_string(name) is expected

    def test_unknown_level(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown log level: loud"):
            LogLevel.from_string("loud")


class TestLogFormat:
    """Tests for LogFormat.parse()."""

    def test_parse(self) -> None:
        assert LogFormat.parse("JSON") is LogFormat.JSON
        assert LogFormat.parse(LogFormat.CONSOLE) is LogFormat.CONSOLE

    def test_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError):
            LogFormat.parse("xml")


class TestFormatters:
    """Tests for the JSON and console formatters."""

    def test_json_includes_fields(self) -> None:
        record = _record(fields={"count": 3})

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "debug"
        assert data["message"] == "Discovered fields"
        assert data["logger"] == "schemadoc.driver"
        assert data["count"] == 3
        assert "timestamp" in data

    def test_json_without_fields(self) -> None:
        data = json.loads(JSONFormatter().format(_record()))

        assert "exception" not in data
        assert set(data) == {"timestamp", "level", "message", "logger"}

    def test_console_plain(self) -> None:
        formatter = ConsoleFormatter(color=False, show_timestamp=False)

        line = formatter.format(_record(fields={"field": "#Build"}))

        assert line == "DEBUG [schemadoc.driver] Discovered fields field=#Build"

    def test_console_color(self) -> None:
        formatter = ConsoleFormatter(color=True, show_timestamp=False)

        line = formatter.format(_record())

        assert "\033[36m" in line
        assert line.endswith("Discovered fields")


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_json_to_stream(self) -> None:
        stream = io.StringIO()

        configure_logging(level="debug", format="json", stream=stream)
        logging.getLogger("schemadoc.compiler").debug(
            "Compiled package", extra={"fields": {"package": "pkg"}}
        )

        data = json.loads(stream.getvalue())
        assert data["package"] == "pkg"

    def test_auto_uses_json_off_terminal(self) -> None:
        stream = io.StringIO()

        configure_logging(level="info", stream=stream)
        logging.getLogger("schemadoc.driver").info("Report written")

        assert json.loads(stream.getvalue())["message"] == "Report written"

    def test_level_filters(self) -> None:
        stream = io.StringIO()

        configure_logging(level="warning", format="console", stream=stream)
        logging.getLogger("schemadoc.driver").info("hidden")

        assert stream.getvalue() == ""

    def test_reconfigure_replaces_handler(self) -> None:
        """Test a second call does not duplicate output."""
        first, second = io.StringIO(), io.StringIO()

        configure_logging(format="json", stream=first)
        logger = configure_logging(format="json", stream=second)
        logging.getLogger("schemadoc.driver").info("once")

        assert logger.name == ROOT_LOGGER
        assert first.getvalue() == ""
        assert len(second.getvalue().splitlines()) == 1
        assert logger.propagate is False
