"""Decide whether a stream can take colored output.

Absence of color support is the normal outcome for pipes, files and dumb
terminals, so nothing here raises: every probe answers ``True`` or
``False``.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TextIO

import structlog

from consolecolor import win32

logger = structlog.get_logger()


class Platform(Enum):
    """Console model of the running OS."""

    POSIX = "posix"  # escape sequences, TERM
    WINDOWS = "windows"  # console handles
    UNSUPPORTED = "unsupported"


def current_platform() -> Platform:
    if sys.platform == "win32":
        return Platform.WINDOWS
    if os.name == "posix":
        return Platform.POSIX
    return Platform.UNSUPPORTED


def is_terminal(stream: TextIO) -> bool:
    """True if the descriptor behind ``stream`` is an interactive terminal."""
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        # In-memory or closed streams have no descriptor
        return False
    return os.isatty(fd)


def term_supports_color(term: str | None) -> bool:
    """True unless ``TERM`` is missing, empty or ``dumb``."""
    return bool(term) and term != "dumb"


def detect(
    stream: TextIO,
    force_colors: bool = False,
    *,
    api: win32.ConsoleApi | None = None,
) -> bool:
    """Return whether escape-sequence color output is usable on ``stream``.

    Args:
        stream: The caller-owned output stream.
        force_colors: Skip all probing and answer ``True``.
        api: Windows console API; defaults to kernel32.

    On Windows this may switch the console into virtual-terminal mode.
    """
    if force_colors:
        return True

    platform = current_platform()
    if platform is Platform.POSIX:
        term = os.environ.get("TERM")
        if not is_terminal(stream):
            logger.debug("console_capability_absent", reason="not_a_tty")
            return False
        if not term_supports_color(term):
            logger.debug("console_capability_absent", reason="term", term=term)
            return False
        return True

    if platform is Platform.WINDOWS:
        if api is None:
            api = win32.Kernel32Console()
        handle = win32.get_console_handle(stream, api)
        if handle is None:
            logger.debug("console_capability_absent", reason="no_console_handle")
            return False
        return win32.try_enable_ansi_codes(handle, api)

    logger.debug("console_capability_absent", reason="unsupported_platform")
    return False
