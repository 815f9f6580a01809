"""consolecolor CLI: try out and diagnose console colors.

Entry point: ``consolecolor`` (or ``python -m consolecolor``)

Subcommands:
    consolecolor palette        Print every named color
    consolecolor show COLOR ... Print text in one color
    consolecolor doctor         Explain why a stream is (not) colored
"""

from __future__ import annotations

import argparse

import structlog

from consolecolor.color import Color
from consolecolor.config import Settings
from consolecolor.logging import setup_logging

logger = structlog.get_logger()


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--color",
        action="store_true",
        help="Force colors even when the stream is not a terminal",
    )
    parser.add_argument(
        "--stream",
        choices=["stdout", "stderr"],
        default=None,
        help="Stream to colorize (default: CONSOLECOLOR_STREAM or stdout)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="consolecolor",
        description="Colored console output for terminals and Windows consoles",
    )
    sub = parser.add_subparsers(dest="command")

    # --- consolecolor palette ---
    palette_parser = sub.add_parser("palette", help="Print every named color")
    _add_common(palette_parser)

    # --- consolecolor show ---
    show_parser = sub.add_parser("show", help="Print text in one color")
    show_parser.add_argument("color", help="Color name, e.g. bright-red or lightGray")
    show_parser.add_argument("text", nargs="+", help="Text to print")
    _add_common(show_parser)

    # --- consolecolor doctor ---
    doctor_parser = sub.add_parser("doctor", help="Explain the color decision for a stream")
    _add_common(doctor_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point dispatching to subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    settings = Settings()
    setup_logging(settings.log_level)

    from consolecolor.cli._helpers import resolve_stream

    stream = resolve_stream(args.stream or settings.stream)
    force_colors = args.color or settings.force_colors
    logger.debug("cli_start", command=args.command, force_colors=force_colors)

    if args.command == "palette":
        from consolecolor.cli.palette import run_palette

        run_palette(stream, force_colors=force_colors)
    elif args.command == "show":
        try:
            color = Color.parse(args.color)
        except ValueError as e:
            parser.error(str(e))
        from consolecolor.cli.palette import run_show

        run_show(stream, color, " ".join(args.text), force_colors=force_colors)
    elif args.command == "doctor":
        from consolecolor.cli.doctor import run_doctor

        run_doctor(stream, force_colors=force_colors)


if __name__ == "__main__":
    main()
