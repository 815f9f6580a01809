"""Color samples: ``consolecolor palette`` and ``consolecolor show``."""

from __future__ import annotations

from typing import TextIO

from consolecolor.cli._helpers import open_console
from consolecolor.color import Color

# BRIGHT on its own is the DARK_GRAY alias
_SKIPPED = frozenset({"BRIGHT"})


def palette_names() -> list[str]:
    """Named colors in definition order, aliases included."""
    return [name for name in Color.__members__ if name not in _SKIPPED]


def run_palette(stream: TextIO, *, force_colors: bool = False) -> None:
    """Print every named color in itself."""
    console, printer = open_console(stream, force_colors)
    printer.header("Palette")
    for name in palette_names():
        color = Color[name]
        printer.write("  ")
        printer.write(f"{name.lower():<16}", color)
        printer.write(f" hue={color.hue} bright={int(color.is_bright)}\n")
    if console is not None:
        console.reset_color()


def run_show(stream: TextIO, color: Color, text: str, *, force_colors: bool = False) -> None:
    """Print ``text`` in ``color`` followed by a newline."""
    _, printer = open_console(stream, force_colors)
    printer.write(text, color)
    printer.write("\n")
