"""
Main Textual application for the diff viewer.

The formatted diff is computed before the app starts; the app only owns
the display session (loading indicator, pane, quit keys).
"""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from sidediff.tui.screens import DiffScreen


class DiffViewerApp(App):
    """A Textual app showing a formatted unified diff in a scrollable pane."""

    TITLE = "sidediff"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 3;
        background: $primary-darken-2;
    }

    DiffPane:focus {
        border: solid $accent;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, content: str, summary: str = "") -> None:
        """Initialize the app with pre-formatted diff content.

        Args:
            content: Rich markup produced by format_diff().
            summary: Optional one-line summary shown as the sub-title.
        """
        super().__init__()
        self._content = content
        self._session_mounted = False
        self.sub_title = summary

    def on_mount(self) -> None:
        """Push the diff screen."""
        self._session_mounted = True
        self.push_screen(DiffScreen(self._content))

    @property
    def start_failure(self) -> BaseException | None:
        """The error that stopped the app before it mounted, if any.

        Failures after mount (while the diff is on screen) are not start
        failures and give None.
        """
        if self._session_mounted:
            return None
        return self._exception
