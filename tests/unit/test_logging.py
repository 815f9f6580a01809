"""Tests for structlog setup."""

import io

import structlog

from consolecolor.logging import setup_logging


class TestSetupLogging:
    def test_renders_to_stream(self) -> None:
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        structlog.get_logger().info("console_created", strategy="AnsiConsole")
        out = stream.getvalue()
        assert "console_created" in out
        assert "strategy=AnsiConsole" in out

    def test_filters_below_level(self) -> None:
        stream = io.StringIO()
        setup_logging("WARNING", stream=stream)
        structlog.get_logger().debug("console_capability_absent", reason="not_a_tty")
        structlog.get_logger().info("console_created")
        assert stream.getvalue() == ""

    def test_no_escape_sequences_in_log_lines(self) -> None:
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream)
        structlog.get_logger().debug("ansi_mode_enabled", mode=7)
        assert "\x1b" not in stream.getvalue()
