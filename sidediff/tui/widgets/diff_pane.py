"""
DiffPane widget: the scrollable text pane holding the formatted diff.

Scrolling and paging come from Textual's VerticalScroll bindings; this
module only seeds the content and applies the size decided by the session.
"""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static


class DiffPane(VerticalScroll):
    """Scrollable pane showing pre-rendered diff markup."""

    DEFAULT_CSS = """
    DiffPane {
        border: solid $primary;
        padding: 0 1;
    }

    DiffPane > #diff-content {
        width: auto;
    }

    DiffPane > .empty-diff {
        color: $text-muted;
        text-style: italic;
    }
    """

    def __init__(self, content: str, **kwargs: Any) -> None:
        """Initialize the pane.

        Args:
            content: Rich markup produced by the diff formatter.
            **kwargs: Additional arguments passed to VerticalScroll.
        """
        super().__init__(**kwargs)
        self._content = content

    def compose(self) -> ComposeResult:
        if not self._content:
            yield Static("No changes to display.", classes="empty-diff", markup=False)
            return
        yield Static(self._content, id="diff-content", markup=True)

    def render_content(self) -> str:
        """Return the pane's content as rendered markup text."""
        return self._content

    def set_dimensions(self, width: int, height: int) -> None:
        """Size the pane in terminal cells."""
        self.styles.width = width
        self.styles.height = height


def create_pane(width: int, height: int, initial_content: str) -> DiffPane:
    """Build a pane of the given size seeded with formatted diff markup."""
    pane = DiffPane(initial_content, id="diff-pane")
    pane.set_dimensions(width, height)
    return pane


def resize_pane(pane: DiffPane, width: int, height: int) -> None:
    """Adjust the dimensions of an existing pane."""
    pane.set_dimensions(width, height)
