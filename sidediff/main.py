#!/usr/bin/env python3
"""
sidediff

View a unified diff from standard input in a scrollable terminal pane.

Usage:
    git diff | python -m sidediff.main              Interactive viewer
    git diff | python -m sidediff.main --print      Print formatted diff
    git diff | python -m sidediff.main --timeout 5  Give up on stalled input

Input ends at the first blank line or at end of stream.

Exit codes:
    0   Normal quit, or --print finished
    1   The terminal session could not be started
    2   The input could not be read or parsed
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

from rich.console import Console

from sidediff.diff_formats import (
    DiffInputError,
    parse_diff,
    read_diff_text,
    render_diff,
    strip_markup,
    summarize,
)
from sidediff.tui.app import DiffViewerApp
from sidediff.tui.terminal import SessionStartError, attach_terminal

logger = logging.getLogger(__name__)

EXIT_SESSION_ERROR = 1
EXIT_INPUT_ERROR = 2


@dataclass(frozen=True)
class ViewerConfig:
    """Settings collected from the command line."""

    timeout: float | None = None
    print_only: bool = False
    plain: bool = False
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the sidediff CLI."""
    parser = argparse.ArgumentParser(
        prog="sidediff",
        description="View a unified diff from standard input in a terminal UI. "
        "Input ends at the first blank line or at end of stream.",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Fail if the input has not ended after SECONDS (default: wait forever)",
    )
    parser.add_argument(
        "-p",
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the formatted diff to stdout instead of starting the viewer",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="With --print, write plain text without colors",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing details to stderr",
    )
    return parser


def parse_config(argv: list[str] | None = None) -> ViewerConfig:
    """Parse command-line arguments into a ViewerConfig."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds")
    return ViewerConfig(
        timeout=args.timeout,
        print_only=args.print_only,
        plain=args.plain,
        verbose=args.verbose,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def print_diff(content: str, plain: bool = False) -> None:
    """Write formatted diff markup to stdout."""
    if plain:
        sys.stdout.write(strip_markup(content))
        return
    console = Console(highlight=False, soft_wrap=True)
    console.print(content, end="")


def run_viewer(content: str, summary: str) -> int:
    """Start the interactive session and return its exit code.

    Raises:
        SessionStartError: If no terminal is available, or the app failed
            before its screen was mounted (for example the driver could not
            set up the terminal).
    """
    attach_terminal()
    app = DiffViewerApp(content, summary=summary)
    try:
        app.run()
    except OSError as e:
        raise SessionStartError(str(e)) from e
    failure = app.start_failure
    if failure is not None:
        raise SessionStartError(str(failure) or type(failure).__name__) from failure
    return app.return_code or 0


def main(argv: list[str] | None = None) -> None:
    """Read the diff, format it, and show it."""
    config = parse_config(argv)
    configure_logging(config.verbose)

    try:
        raw_text = read_diff_text(sys.stdin, timeout=config.timeout)
        parsed = parse_diff(raw_text)
    except DiffInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_INPUT_ERROR)

    content = render_diff(parsed)
    summary = summarize(parsed)
    logger.debug("Formatted %s", summary)

    if config.print_only:
        print_diff(content, plain=config.plain)
        return

    try:
        exit_code = run_viewer(content, summary)
    except SessionStartError as e:
        print(f"Alas, there's been an error: {e}", file=sys.stderr)
        sys.exit(EXIT_SESSION_ERROR)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
