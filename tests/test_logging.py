"""Tests for structured logging configuration."""

from __future__ import annotations

import io
import json
import sys

import pytest
import structlog

from core.config import Settings
from core.logging import configure_from_settings, configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_default(self) -> None:
        """configure_logging should work with defaults."""
        configure_logging()

        assert structlog.get_logger() is not None

    def test_configure_logging_json_format(self) -> None:
        """configure_logging should configure JSON format."""
        configure_logging(json_format=True)

        assert structlog.get_logger() is not None

    def test_configure_logging_debug_level(self) -> None:
        """configure_logging should accept a lowercase level."""
        configure_logging(log_level="debug")

        assert structlog.get_logger() is not None

    def test_configure_from_settings(self) -> None:
        """configure_from_settings should use debug and log_json."""
        configure_from_settings(Settings(debug=True, log_json=True))

        assert structlog.get_logger() is not None


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_with_name(self) -> None:
        """get_logger should accept a plugin name."""
        configure_logging()

        assert get_logger("pointmintmarket-pic") is not None

    def test_logger_can_log_error_with_context(self) -> None:
        """Logger should log errors with keyword context."""
        configure_logging()
        logger = get_logger("test").bind(plugin="pointmintmarket-pic")

        # Should not raise
        logger.error("purchase_failed", item="Sunset", code="timeout")


class TestLogOutput:
    """Tests for rendered log output."""

    @pytest.fixture()
    def stderr(self, monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
        """Replace stderr with a buffer for the duration of a test."""
        buffer = io.StringIO()
        monkeypatch.setattr(sys, "stderr", buffer)
        return buffer

    def test_json_lines_go_to_stderr(self, stderr: io.StringIO) -> None:
        """JSON output should carry the event, level and bound keys."""
        configure_logging(json_format=True)

        get_logger("test").bind(plugin="pointmintmarket-pic").info("items_registered", count=2)

        record = json.loads(stderr.getvalue())
        assert record["event"] == "items_registered"
        assert record["level"] == "info"
        assert record["plugin"] == "pointmintmarket-pic"
        assert record["count"] == 2
        assert "timestamp" in record

    def test_json_keeps_non_ascii(self, stderr: io.StringIO) -> None:
        """JSON output should not escape non-ASCII text."""
        configure_logging(json_format=True)

        get_logger("test").info("purchase_failed", item="日落")

        assert "日落" in stderr.getvalue()

    def test_level_filters_debug(self, stderr: io.StringIO) -> None:
        """INFO level should drop debug events."""
        configure_logging(json_format=True, log_level="INFO")

        get_logger("test").debug("request_sent")

        assert stderr.getvalue() == ""

    def test_console_format(self, stderr: io.StringIO) -> None:
        """Console output should include the event and its context."""
        configure_logging(log_level="debug")

        get_logger("test").debug("request_sent", item="Sunset")

        output = stderr.getvalue()
        assert "request_sent" in output
        assert "item=Sunset" in output
