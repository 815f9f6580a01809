"""Tests for the shared CLI output module."""

import io

from consolecolor.cli.output import Printer
from consolecolor.console import AnsiConsole


class TestPlainPrinter:
    def test_ok_prints_checkmark(self) -> None:
        stream = io.StringIO()
        Printer(stream).ok("test message")
        assert stream.getvalue() == "  ✓ test message\n"

    def test_warn_prints_message(self) -> None:
        stream = io.StringIO()
        Printer(stream).warn("warning here")
        assert "warning here" in stream.getvalue()

    def test_err_prints_message(self) -> None:
        stream = io.StringIO()
        Printer(stream).err("error here")
        assert "error here" in stream.getvalue()

    def test_info_prints_message(self) -> None:
        stream = io.StringIO()
        Printer(stream).info("info here")
        assert "info here" in stream.getvalue()

    def test_header_prints_title(self) -> None:
        stream = io.StringIO()
        Printer(stream).header("My Section")
        out = stream.getvalue()
        assert "My Section" in out
        # Should contain horizontal rules
        assert "─" in out
        assert "\x1b" not in out


class TestColoredPrinter:
    def test_symbol_colored_message_plain(self) -> None:
        stream = io.StringIO()
        Printer(stream, AnsiConsole(stream)).ok("done")
        assert stream.getvalue() == "  \x1b[1;32m✓\x1b[m done\n"

    def test_err_is_bright_red(self) -> None:
        stream = io.StringIO()
        Printer(stream, AnsiConsole(stream)).err("failed")
        assert "\x1b[1;31m✗\x1b[m" in stream.getvalue()

    def test_header_resets_after_each_line(self) -> None:
        stream = io.StringIO()
        Printer(stream, AnsiConsole(stream)).header("Palette")
        out = stream.getvalue()
        assert out.count("\x1b[1;37m") == 3
        assert out.count("\x1b[m") == 3
