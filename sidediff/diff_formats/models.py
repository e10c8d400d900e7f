"""
Immutable data model for parsed unified diffs.

A ParsedDiff is built once from the captured input and handed to the
formatter. Nothing in this module knows about the terminal UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEV_NULL = "/dev/null"


class LineKind(Enum):
    """Change marker of a single line within a hunk."""

    UNCHANGED = "unchanged"
    REMOVED = "removed"
    ADDED = "added"


@dataclass(frozen=True)
class Range:
    """A (start, length) span in one version of a file."""

    start: int
    length: int


@dataclass(frozen=True)
class DiffLine:
    """One line of a hunk.

    Attributes:
        position: Line number in the resulting file. Removed lines have no
            place there, so they carry their line number in the old file.
        kind: Whether the line is unchanged, removed or added.
        content: Line text without its line terminator.
    """

    position: int
    kind: LineKind
    content: str


@dataclass(frozen=True)
class Hunk:
    """A contiguous block of changes with its old and new ranges."""

    original_range: Range
    new_range: Range
    lines: tuple[DiffLine, ...] = ()
    section_header: str = ""

    @property
    def whole_range(self) -> Range:
        """Overall position of the hunk: new-file start, longest side."""
        return Range(
            start=self.new_range.start,
            length=max(self.original_range.length, self.new_range.length),
        )

    @property
    def added_count(self) -> int:
        return sum(1 for line in self.lines if line.kind is LineKind.ADDED)

    @property
    def removed_count(self) -> int:
        return sum(1 for line in self.lines if line.kind is LineKind.REMOVED)


@dataclass(frozen=True)
class FileDiff:
    """All hunks touching a single file."""

    old_path: str
    new_path: str
    hunks: tuple[Hunk, ...] = ()

    @property
    def is_added_file(self) -> bool:
        return self.old_path == DEV_NULL

    @property
    def is_removed_file(self) -> bool:
        return self.new_path == DEV_NULL

    @property
    def path(self) -> str:
        """Display path with the a/ or b/ prefix stripped."""
        raw = self.old_path if self.is_removed_file else self.new_path
        if raw.startswith(("a/", "b/")):
            return raw[2:]
        return raw


@dataclass(frozen=True)
class ParsedDiff:
    """Root artifact produced by parsing raw diff text."""

    files: tuple[FileDiff, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.files

    @property
    def hunk_count(self) -> int:
        return sum(len(f.hunks) for f in self.files)

    @property
    def added_count(self) -> int:
        return sum(h.added_count for f in self.files for h in f.hunks)

    @property
    def removed_count(self) -> int:
        return sum(h.removed_count for f in self.files for h in f.hunks)
