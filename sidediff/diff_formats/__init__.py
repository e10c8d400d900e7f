"""
Diff input module: capture, parse and format unified diffs.

Usage:
    from sidediff.diff_formats import format_diff, read_diff_text

    raw = read_diff_text(sys.stdin)
    markup = format_diff(raw)

    # Or keep the parsed model around
    from sidediff.diff_formats import parse_diff, render_diff
    parsed = parse_diff(raw)
    print(parsed.hunk_count)
"""

from sidediff.diff_formats.errors import (
    DiffInputError,
    InputParseError,
    InputReadError,
    InputTimeoutError,
)
from sidediff.diff_formats.formatter import (
    ADDITION_STYLE,
    DELETION_STYLE,
    format_diff,
    render_diff,
    strip_markup,
    summarize,
)
from sidediff.diff_formats.models import (
    DiffLine,
    FileDiff,
    Hunk,
    LineKind,
    ParsedDiff,
    Range,
)
from sidediff.diff_formats.parser import parse_diff
from sidediff.diff_formats.reader import read_diff_text

__all__ = [
    # Errors
    "DiffInputError",
    "InputParseError",
    "InputReadError",
    "InputTimeoutError",
    # Model
    "DiffLine",
    "FileDiff",
    "Hunk",
    "LineKind",
    "ParsedDiff",
    "Range",
    # Pipeline
    "read_diff_text",
    "parse_diff",
    "render_diff",
    "format_diff",
    "strip_markup",
    "summarize",
    "ADDITION_STYLE",
    "DELETION_STYLE",
]
