"""Colored console output for POSIX terminals and Windows consoles."""

from consolecolor.color import Color
from consolecolor.console import AnsiConsole, Console, WindowsConsole, create

__all__ = ["AnsiConsole", "Color", "Console", "WindowsConsole", "create"]
