"""Capability diagnostics: ``consolecolor doctor``.

Explains why a stream does or does not get colored output: platform,
terminal check, ``TERM`` value, and the controller the factory picks.
"""

from __future__ import annotations

import os
import platform
from typing import TextIO

from consolecolor import detect as capability
from consolecolor.cli._helpers import open_console
from consolecolor.cli.output import Printer
from consolecolor.detect import Platform


class DoctorReport:
    """Collects check results for a summary at the end."""

    def __init__(self, printer: Printer) -> None:
        self.printer = printer
        self.passed: int = 0
        self.warnings: int = 0

    def ok(self, msg: str) -> None:
        self.printer.ok(msg)
        self.passed += 1

    def warn(self, msg: str) -> None:
        self.printer.warn(msg)
        self.warnings += 1

    @property
    def total(self) -> int:
        return self.passed + self.warnings


def _check_platform(report: DoctorReport) -> Platform:
    kind = capability.current_platform()
    label = f"{platform.system()} {platform.release()} ({kind.value})"
    if kind is Platform.UNSUPPORTED:
        report.warn(f"{label}: no console color support")
    else:
        report.ok(label)
    return kind


def _check_terminal(report: DoctorReport, stream: TextIO, kind: Platform) -> None:
    if capability.is_terminal(stream):
        report.ok("Stream is a terminal")
    else:
        report.warn("Stream is not a terminal (pipe or file)")

    if kind is not Platform.POSIX:
        return
    term = os.environ.get("TERM")
    if capability.term_supports_color(term):
        report.ok(f"TERM={term}")
    else:
        report.warn(f"TERM={term!r} does not support color")


def _check_controller(report: DoctorReport, stream: TextIO, force_colors: bool) -> None:
    if force_colors:
        report.ok("Colors forced on")
    if capability.detect(stream, force_colors):
        report.ok("ANSI escape sequences usable")
    else:
        report.warn("ANSI escape sequences not usable")

    console, _ = open_console(stream, force_colors)
    if console is None:
        report.warn("No color controller, output stays plain")
    else:
        report.ok(f"Controller: {type(console).__name__}")


def run_doctor(stream: TextIO, *, force_colors: bool = False) -> DoctorReport:
    """Run all checks against ``stream`` and print a summary."""
    _, printer = open_console(stream, force_colors)
    report = DoctorReport(printer)

    printer.header("Console color doctor")
    kind = _check_platform(report)
    _check_terminal(report, stream, kind)
    _check_controller(report, stream, force_colors)

    printer.header("Summary")
    printer.write(f"  Passed:   {report.passed}\n")
    printer.write(f"  Warnings: {report.warnings}\n")
    return report
