"""
Render a ParsedDiff as Rich console markup for the diff pane.

Removed lines are wrapped in the deletion style and added lines in the
addition style. Unchanged lines are consumed but produce no output.
"""

from __future__ import annotations

from rich.markup import escape
from rich.text import Text

from sidediff.diff_formats.models import DiffLine, Hunk, LineKind, ParsedDiff
from sidediff.diff_formats.parser import parse_diff

# Highlight colors
DELETION_STYLE = "#e23868"
ADDITION_STYLE = "#04B575"

LINE_STYLES: dict[LineKind, str] = {
    LineKind.REMOVED: DELETION_STYLE,
    LineKind.ADDED: ADDITION_STYLE,
}


def format_hunk_header(hunk: Hunk) -> str:
    """Return the "start, length" line reported for a hunk."""
    whole = hunk.whole_range
    return f"{whole.start}, {whole.length}"


def format_line(line: DiffLine) -> str | None:
    """Return the styled markup for a line, or None if it is not shown."""
    style = LINE_STYLES.get(line.kind)
    if style is None:
        return None
    return f"{line.position} [{style}]{escape(line.content)}[/]"


def render_diff(parsed: ParsedDiff) -> str:
    """Render every hunk of every file into one markup string.

    Each hunk contributes its header line followed by one line per added or
    removed DiffLine. Every emitted line ends with "\\n".
    """
    parts: list[str] = []
    for file_diff in parsed.files:
        for hunk in file_diff.hunks:
            parts.append(format_hunk_header(hunk) + "\n")
            for line in hunk.lines:
                rendered = format_line(line)
                if rendered is not None:
                    parts.append(rendered + "\n")
    return "".join(parts)


def format_diff(raw_text: str) -> str:
    """Parse raw unified diff text and render it for display.

    Raises:
        InputParseError: If the text is not well-formed unified diff.
    """
    return render_diff(parse_diff(raw_text))


def strip_markup(markup: str) -> str:
    """Return the plain text of rendered markup."""
    return Text.from_markup(markup).plain


def summarize(parsed: ParsedDiff) -> str:
    """One-line summary such as "2 files, 3 hunks, +10 -4"."""
    files = len(parsed.files)
    hunks = parsed.hunk_count
    return (
        f"{files} file{'s' if files != 1 else ''}, "
        f"{hunks} hunk{'s' if hunks != 1 else ''}, "
        f"+{parsed.added_count} -{parsed.removed_count}"
    )
