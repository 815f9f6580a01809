"""Shared CLI helpers: stream selection and controller setup."""

from __future__ import annotations

import sys
from typing import TextIO

from consolecolor.cli.output import Printer
from consolecolor.console import Console, create


def resolve_stream(name: str) -> TextIO:
    """Map ``stdout``/``stderr`` to the live ``sys`` stream."""
    if name == "stderr":
        return sys.stderr
    return sys.stdout


def open_console(stream: TextIO, force_colors: bool) -> tuple[Console | None, Printer]:
    """Create the controller for ``stream`` and a printer bound to it."""
    console = create(stream, force_colors)
    return console, Printer(stream, console)
