"""Shared CLI output helpers: status lines with colored symbols.

Colors go through a :class:`~consolecolor.console.Console`, so the same
code prints escape sequences on terminals, native attributes on legacy
Windows consoles, and plain text everywhere else.
"""

from __future__ import annotations

from typing import TextIO

from consolecolor.color import Color
from consolecolor.console import Console

RULE_WIDTH = 60


class Printer:
    """Writes status lines to one stream, colored when ``console`` is set."""

    def __init__(self, stream: TextIO, console: Console | None = None) -> None:
        self.stream = stream
        self.console = console

    def write(self, text: str, color: Color | None = None) -> None:
        if self.console is None or color is None:
            self.stream.write(text)
            return
        with self.console.colored(color):
            self.stream.write(text)

    def line(self, symbol: str, color: Color, msg: str) -> None:
        self.write("  ")
        self.write(symbol, color)
        self.write(f" {msg}\n")

    def ok(self, msg: str) -> None:
        """Print a success message with green checkmark."""
        self.line("✓", Color.BRIGHT_GREEN, msg)

    def warn(self, msg: str) -> None:
        """Print a warning message with yellow symbol."""
        self.line("⚠", Color.BRIGHT_YELLOW, msg)

    def err(self, msg: str) -> None:
        """Print an error message with red cross."""
        self.line("✗", Color.BRIGHT_RED, msg)

    def info(self, msg: str) -> None:
        """Print an informational message with cyan symbol."""
        self.line("ℹ", Color.BRIGHT_CYAN, msg)

    def header(self, title: str) -> None:
        """Print a section header with horizontal rules."""
        rule = "─" * RULE_WIDTH
        self.write("\n")
        self.write(f"  {rule}\n", Color.WHITE)
        self.write(f"  {title}\n", Color.WHITE)
        self.write(f"  {rule}\n", Color.WHITE)
        self.write("\n")
