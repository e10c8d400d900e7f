"""
Unified diff parsing.

The heavy lifting is done by unidiff; this module converts its PatchSet into
the immutable models in sidediff.diff_formats.models and adds the structural
checks unidiff leaves out (malformed hunk headers, body lines with no hunk).
"""

from __future__ import annotations

import logging
import re

from unidiff import PatchSet
from unidiff.errors import UnidiffParseError

from sidediff.diff_formats.errors import InputParseError
from sidediff.diff_formats.models import DiffLine, FileDiff, Hunk, LineKind, ParsedDiff, Range

logger = logging.getLogger(__name__)

HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")

# Header used when the input is a bare hunk with no ---/+++ lines
PLACEHOLDER_FILE_HEADER = "--- a/-\n+++ b/-\n"

# unidiff line types
_LINE_KINDS: dict[str, LineKind] = {
    "+": LineKind.ADDED,
    "-": LineKind.REMOVED,
    " ": LineKind.UNCHANGED,
}


def _starts_with_hunk(raw_text: str) -> bool:
    for line in raw_text.splitlines():
        if line.strip():
            return line.startswith("@@")
    return False


def _check_structure(raw_text: str) -> None:
    """Reject hunk headers unidiff would skip and body lines outside hunks.

    Raises:
        InputParseError: On the first offending line.
    """
    old_left = new_left = 0

    for line_no, line in enumerate(raw_text.splitlines(), start=1):
        if old_left > 0 or new_left > 0:
            marker = line[:1]
            if marker in (" ", ""):
                old_left -= 1
                new_left -= 1
            elif marker == "-":
                old_left -= 1
            elif marker == "+":
                new_left -= 1
            continue

        if line.startswith("@@"):
            match = HUNK_HEADER_RE.match(line)
            if match is None:
                raise InputParseError(f"line {line_no}: malformed hunk header: {line!r}")
            old_left = 1 if match.group(2) is None else int(match.group(2))
            new_left = 1 if match.group(4) is None else int(match.group(4))
            continue

        if line.startswith(("--- ", "+++ ")):
            continue
        if line.startswith(("+", "-")):
            raise InputParseError(f"line {line_no}: change line outside of a hunk: {line!r}")


def _convert_line(line) -> DiffLine | None:
    kind = _LINE_KINDS.get(line.line_type)
    if kind is None:
        # "\ No newline at end of file" and similar markers
        return None
    if kind is LineKind.REMOVED:
        position = line.source_line_no
    else:
        position = line.target_line_no
    return DiffLine(position=position, kind=kind, content=line.value.rstrip("\r\n"))


def _convert_hunk(hunk) -> Hunk:
    lines = tuple(
        converted for converted in (_convert_line(line) for line in hunk)
        if converted is not None
    )
    return Hunk(
        original_range=Range(hunk.source_start, hunk.source_length),
        new_range=Range(hunk.target_start, hunk.target_length),
        lines=lines,
        section_header=hunk.section_header,
    )


def parse_diff(raw_text: str) -> ParsedDiff:
    """Parse unified diff text into a ParsedDiff.

    Args:
        raw_text: Diff text as captured by read_diff_text().

    Returns:
        The parsed diff. Empty or whitespace-only text gives zero files.

    Raises:
        InputParseError: If the text is not well-formed unified diff, or if
            non-blank text contains no file header and no hunk.
    """
    if not raw_text.strip():
        return ParsedDiff()

    _check_structure(raw_text)

    if _starts_with_hunk(raw_text):
        raw_text = PLACEHOLDER_FILE_HEADER + raw_text

    try:
        patch = PatchSet.from_string(raw_text)
    except UnidiffParseError as e:
        raise InputParseError(str(e)) from e

    if not patch:
        raise InputParseError("no file header or hunk found in input")

    files = []
    for patched_file in patch:
        hunks = tuple(_convert_hunk(hunk) for hunk in patched_file)
        file_diff = FileDiff(
            old_path=patched_file.source_file,
            new_path=patched_file.target_file,
            hunks=hunks,
        )
        for hunk in hunks:
            logger.debug(
                "%s: whole %s,%s old %s,%s new %s,%s (+%d -%d)",
                file_diff.path,
                hunk.whole_range.start,
                hunk.whole_range.length,
                hunk.original_range.start,
                hunk.original_range.length,
                hunk.new_range.start,
                hunk.new_range.length,
                hunk.added_count,
                hunk.removed_count,
            )
        files.append(file_diff)

    parsed = ParsedDiff(files=tuple(files))
    logger.debug("Parsed %d files with %d hunks", len(parsed.files), parsed.hunk_count)
    return parsed
