"""ctypes bindings for the Windows console API.

Only the handful of kernel32 calls needed for color output are wrapped.
The library is loaded lazily, so this module imports cleanly on every OS;
on non-Windows systems every call simply reports failure.
"""

from __future__ import annotations

import ctypes
from typing import Any, Protocol, TextIO

import structlog

logger = structlog.get_logger()

# ---------------------------------------------------------------------------
# Constants (wincon.h / processenv.h)
# ---------------------------------------------------------------------------
STD_OUTPUT_HANDLE: int = -11
STD_ERROR_HANDLE: int = -12

FOREGROUND_BLUE: int = 0x0001
FOREGROUND_GREEN: int = 0x0002
FOREGROUND_RED: int = 0x0004
FOREGROUND_INTENSITY: int = 0x0008
FOREGROUND_WHITE: int = FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE

ENABLE_VIRTUAL_TERMINAL_PROCESSING: int = 0x0004

_STD_HANDLES = {1: STD_OUTPUT_HANDLE, 2: STD_ERROR_HANDLE}
_INVALID_HANDLES = frozenset({0, -1, ctypes.c_void_p(-1).value})


class _Coord(ctypes.Structure):
    _fields_ = [("X", ctypes.c_short), ("Y", ctypes.c_short)]


class _SmallRect(ctypes.Structure):
    _fields_ = [
        ("Left", ctypes.c_short),
        ("Top", ctypes.c_short),
        ("Right", ctypes.c_short),
        ("Bottom", ctypes.c_short),
    ]


class ConsoleScreenBufferInfo(ctypes.Structure):
    """``CONSOLE_SCREEN_BUFFER_INFO``; only ``wAttributes`` is used."""

    _fields_ = [
        ("dwSize", _Coord),
        ("dwCursorPosition", _Coord),
        ("wAttributes", ctypes.c_uint16),
        ("srWindow", _SmallRect),
        ("dwMaximumWindowSize", _Coord),
    ]


class ConsoleApi(Protocol):
    """The console calls a strategy needs.  Tests supply a fake."""

    def get_std_handle(self, which: int) -> int | None: ...

    def get_console_mode(self, handle: int) -> int | None: ...

    def set_console_mode(self, handle: int, mode: int) -> bool: ...

    def get_text_attribute(self, handle: int) -> int | None: ...

    def set_text_attribute(self, handle: int, attribute: int) -> bool: ...


def _declare(kernel32: Any) -> None:
    """Attach argument/return types so 64-bit handles survive the call."""
    handle = ctypes.c_void_p
    kernel32.GetStdHandle.argtypes = [ctypes.c_uint32]
    kernel32.GetStdHandle.restype = handle
    kernel32.GetConsoleMode.argtypes = [handle, ctypes.POINTER(ctypes.c_uint32)]
    kernel32.SetConsoleMode.argtypes = [handle, ctypes.c_uint32]
    kernel32.GetConsoleScreenBufferInfo.argtypes = [handle, ctypes.POINTER(ConsoleScreenBufferInfo)]
    kernel32.SetConsoleTextAttribute.argtypes = [handle, ctypes.c_uint16]


class Kernel32Console:
    """:class:`ConsoleApi` backed by ``kernel32.dll``.

    Every method returns ``None``/``False`` on failure instead of raising;
    a console that cannot be queried is simply a console without color.
    """

    def __init__(self, kernel32: Any = None) -> None:
        self._kernel32 = kernel32

    def _lib(self) -> Any | None:
        if self._kernel32 is None:
            try:
                kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
            except (AttributeError, OSError):
                logger.debug("kernel32_unavailable")
                return None
            _declare(kernel32)
            self._kernel32 = kernel32
        return self._kernel32

    def _call(self, name: str, *args: Any) -> Any:
        lib = self._lib()
        if lib is None:
            return None
        try:
            return getattr(lib, name)(*args)
        except (OSError, ctypes.ArgumentError) as e:
            logger.debug("kernel32_call_failed", function=name, error=str(e))
            return None

    def get_std_handle(self, which: int) -> int | None:
        handle = self._call("GetStdHandle", which)
        if handle is None or handle in _INVALID_HANDLES:
            return None
        return handle

    def get_console_mode(self, handle: int) -> int | None:
        mode = ctypes.c_uint32()
        if not self._call("GetConsoleMode", handle, ctypes.byref(mode)):
            return None
        return mode.value

    def set_console_mode(self, handle: int, mode: int) -> bool:
        return bool(self._call("SetConsoleMode", handle, mode))

    def get_text_attribute(self, handle: int) -> int | None:
        info = ConsoleScreenBufferInfo()
        if not self._call("GetConsoleScreenBufferInfo", handle, ctypes.byref(info)):
            return None
        return info.wAttributes

    def set_text_attribute(self, handle: int, attribute: int) -> bool:
        return bool(self._call("SetConsoleTextAttribute", handle, attribute))


# ---------------------------------------------------------------------------
# Helpers used by detection and the native strategy
# ---------------------------------------------------------------------------


def get_console_handle(stream: TextIO, api: ConsoleApi) -> int | None:
    """Return the console handle behind ``stream`` (stdout/stderr only)."""
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    which = _STD_HANDLES.get(fd)
    if which is None:
        return None
    return api.get_std_handle(which)


def try_enable_ansi_codes(handle: int, api: ConsoleApi) -> bool:
    """Make sure virtual-terminal processing is on for ``handle``.

    Windows 10 understands ANSI escape sequences, but only once the console
    mode opts in.  Older releases reject the mode bit.
    """
    mode = api.get_console_mode(handle)
    if mode is None:
        return False
    if mode & ENABLE_VIRTUAL_TERMINAL_PROCESSING:
        return True
    if not api.set_console_mode(handle, mode | ENABLE_VIRTUAL_TERMINAL_PROCESSING):
        logger.debug("ansi_mode_enable_failed", mode=mode)
        return False
    logger.debug("ansi_mode_enabled", mode=mode | ENABLE_VIRTUAL_TERMINAL_PROCESSING)
    return True
