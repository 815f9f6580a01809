"""Shared fixtures: fake streams, fake Windows console, platform switch."""

from __future__ import annotations

import io
import os
from collections.abc import Callable, Iterator

import pytest
import structlog

from consolecolor import win32
from consolecolor.detect import Platform


class TtyStream(io.StringIO):
    """In-memory stream that reports a real descriptor number."""

    def __init__(self, fd: int = 1) -> None:
        super().__init__()
        self._fd = fd

    def fileno(self) -> int:
        return self._fd


class FakeConsoleApi:
    """Stand-in for kernel32 with one console attached to stdout/stderr."""

    def __init__(
        self,
        *,
        mode: int = 0,
        attribute: int = 0x07,
        allow_vt: bool = True,
        screen_info: bool = True,
    ) -> None:
        self.mode = mode
        self.attribute = attribute
        self.allow_vt = allow_vt
        self.screen_info = screen_info
        self.handles = {win32.STD_OUTPUT_HANDLE: 100, win32.STD_ERROR_HANDLE: 200}
        self.mode_writes: list[int] = []
        self.attribute_writes: list[int] = []

    def get_std_handle(self, which: int) -> int | None:
        return self.handles.get(which)

    def get_console_mode(self, handle: int) -> int | None:
        return self.mode

    def set_console_mode(self, handle: int, mode: int) -> bool:
        self.mode_writes.append(mode)
        if not self.allow_vt:
            return False
        self.mode = mode
        return True

    def get_text_attribute(self, handle: int) -> int | None:
        return self.attribute if self.screen_info else None

    def set_text_attribute(self, handle: int, attribute: int) -> bool:
        self.attribute = attribute
        self.attribute_writes.append(attribute)
        return True


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def set_platform(monkeypatch: pytest.MonkeyPatch) -> Callable[[Platform], None]:
    """Pretend to run on the given platform."""

    def _set(kind: Platform) -> None:
        monkeypatch.setattr("consolecolor.detect.current_platform", lambda: kind)
        monkeypatch.setattr("consolecolor.console.current_platform", lambda: kind)

    return _set


@pytest.fixture
def tty(monkeypatch: pytest.MonkeyPatch) -> Callable[..., TtyStream]:
    """Factory for streams whose descriptor counts as a terminal (fd 1 and 2)."""
    monkeypatch.setattr(os, "isatty", lambda fd: fd in (1, 2))

    def _make(fd: int = 1) -> TtyStream:
        return TtyStream(fd)

    return _make


@pytest.fixture
def fake_api() -> Callable[..., FakeConsoleApi]:
    """Factory for fake Windows consoles; keyword args as in FakeConsoleApi."""
    return FakeConsoleApi
