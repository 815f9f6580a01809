"""Console controllers: one interface, two ways of coloring text.

``AnsiConsole`` writes SGR escape sequences into the stream itself.
``WindowsConsole`` drives the legacy Windows console through its text
attribute word, for consoles that cannot be switched into ANSI mode.
Use :func:`create` to get whichever one the stream supports.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import structlog

from consolecolor import win32
from consolecolor.color import Color
from consolecolor.detect import Platform, current_platform, detect, is_terminal

logger = structlog.get_logger()

# SGR foreground colors start at 30 (black) and run to 37 (white)
ANSI_FOREGROUND_BASE = 30
ANSI_RESET = "\033[m"


class Console(ABC):
    """Color controller bound to one output stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream

    @abstractmethod
    def set_color_bright(self, bright: bool) -> None:
        """Turn intensity on or off, keeping the current hue."""
        ...

    @abstractmethod
    def set_color(self, color: Color) -> None:
        """Set hue and intensity together."""
        ...

    @abstractmethod
    def reset_color(self) -> None:
        """Return the stream to its original attributes."""
        ...

    @contextmanager
    def colored(self, color: Color) -> Iterator[None]:
        """Write in ``color`` for the duration of the block, then reset."""
        self.set_color(color)
        try:
            yield
        finally:
            self.reset_color()


class AnsiConsole(Console):
    """Colors text with ANSI escape sequences written to the stream."""

    @classmethod
    def create(
        cls,
        stream: TextIO,
        force_colors: bool = False,
        *,
        api: win32.ConsoleApi | None = None,
    ) -> AnsiConsole | None:
        if not detect(stream, force_colors, api=api):
            return None
        logger.debug("console_created", strategy=cls.__name__, forced=force_colors)
        return cls(stream)

    def set_color_bright(self, bright: bool) -> None:
        self._stream.write(f"\033[{int(bright)}m")

    def set_color(self, color: Color) -> None:
        intensity = 1 if color.is_bright else 0
        self._stream.write(f"\033[{intensity};{ANSI_FOREGROUND_BASE + color.hue}m")

    def reset_color(self) -> None:
        self._stream.write(ANSI_RESET)


class WindowsConsole(Console):
    """Colors text through the native console attribute word.

    The attribute word in effect at creation is kept as the baseline that
    :meth:`reset_color` restores, background bits included.
    """

    def __init__(
        self,
        stream: TextIO,
        handle: int,
        baseline: int,
        api: win32.ConsoleApi,
    ) -> None:
        super().__init__(stream)
        self._handle = handle
        self._baseline = baseline
        self._api = api

    @property
    def baseline(self) -> int:
        return self._baseline

    @classmethod
    def create(
        cls,
        stream: TextIO,
        force_colors: bool = False,
        *,
        api: win32.ConsoleApi | None = None,
    ) -> WindowsConsole | None:
        if not force_colors and not is_terminal(stream):
            return None
        if api is None:
            api = win32.Kernel32Console()

        handle = win32.get_console_handle(stream, api)
        if handle is None:
            logger.debug("console_capability_absent", reason="no_console_handle")
            return None

        baseline = api.get_text_attribute(handle)
        if baseline is None:
            logger.debug("console_capability_absent", reason="screen_buffer_info")
            return None

        logger.debug("console_created", strategy=cls.__name__, baseline=baseline)
        return cls(stream, handle, baseline, api)

    def _current(self) -> int:
        attribute = self._api.get_text_attribute(self._handle)
        if attribute is None:
            return self._baseline
        return attribute

    def _apply(self, attribute: int) -> None:
        # Text already written must keep the color it was written in
        self._stream.flush()
        if not self._api.set_text_attribute(self._handle, attribute):
            logger.debug("console_attribute_write_failed", attribute=attribute)

    def set_color_bright(self, bright: bool) -> None:
        attribute = self._current()
        if bright:
            attribute |= win32.FOREGROUND_INTENSITY
        else:
            attribute &= ~win32.FOREGROUND_INTENSITY
        self._apply(attribute)

    def set_color(self, color: Color) -> None:
        attribute = self._current() & ~(win32.FOREGROUND_WHITE | win32.FOREGROUND_INTENSITY)
        if color & Color.RED:
            attribute |= win32.FOREGROUND_RED
        if color & Color.GREEN:
            attribute |= win32.FOREGROUND_GREEN
        if color & Color.BLUE:
            attribute |= win32.FOREGROUND_BLUE
        if color & Color.BRIGHT:
            attribute |= win32.FOREGROUND_INTENSITY
        self._apply(attribute)

    def reset_color(self) -> None:
        self._apply(self._baseline)


def create(
    stream: TextIO,
    force_colors: bool = False,
    *,
    api: win32.ConsoleApi | None = None,
) -> Console | None:
    """Return a color controller for ``stream``, or ``None`` without color.

    Args:
        stream: Output stream; it stays owned by the caller.
        force_colors: Color even when the stream is not a terminal.
        api: Windows console API override, mainly for tests.
    """
    platform = current_platform()
    if platform is Platform.POSIX:
        return AnsiConsole.create(stream, force_colors)
    if platform is Platform.WINDOWS:
        if api is None:
            api = win32.Kernel32Console()
        console: Console | None = AnsiConsole.create(stream, force_colors, api=api)
        if console is None:
            console = WindowsConsole.create(stream, force_colors, api=api)
        return console
    return None
