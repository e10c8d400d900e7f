"""
Diff Screen: the single screen of the viewer.

Shows a loading indicator until the terminal size is known, then replaces
it with the diff pane. The session state lives on the screen and is only
changed through next_state().
"""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Center, Container, Middle, ScrollableContainer
from textual.screen import Screen
from textual.widgets import Footer, Header, LoadingIndicator, Static

from sidediff.tui.mixins import VimNavigationMixin
from sidediff.tui.session import Initializing, Ready, SessionState, next_state
from sidediff.tui.widgets import DiffPane, create_pane, resize_pane


class DiffScreen(VimNavigationMixin, Screen):
    """Screen hosting the diff pane inside a header/footer frame."""

    CSS = """
    DiffScreen {
        layout: vertical;
    }

    #diff-body {
        height: 1fr;
    }

    #loading-container {
        width: 40;
        height: 5;
    }

    #loading-label {
        text-align: center;
        color: $text-muted;
    }
    """

    BINDINGS = VimNavigationMixin.VIM_BINDINGS

    def __init__(
        self,
        content: str,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the DiffScreen.

        Args:
            content: Formatted diff markup used to seed the pane.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._content = content
        self._state: SessionState = Initializing()
        self._pane: DiffPane | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="diff-body"):
            with Center(id="loading"):
                with Middle(id="loading-container"):
                    yield LoadingIndicator()
                    yield Static("Initializing", id="loading-label")
        yield Footer()

    def on_mount(self) -> None:
        # The terminal size is already known by the time the first refresh
        # happens, so do not rely on a Resize reaching this screen.
        self.call_after_refresh(self._apply_initial_size)

    def on_resize(self, event: events.Resize) -> None:
        self.apply_size(event.size.width, event.size.height)

    def _apply_initial_size(self) -> None:
        if isinstance(self._state, Initializing):
            self.apply_size(self.app.size.width, self.app.size.height)

    def apply_size(self, width: int, height: int) -> None:
        """Feed a terminal size into the session state machine.

        Args:
            width: Terminal width in cells.
            height: Terminal height in cells.
        """
        previous = self._state
        self._state = next_state(previous, width, height)

        if isinstance(previous, Initializing):
            self._become_ready(self._state)
        elif self._pane is not None:
            resize_pane(self._pane, self._state.width, self._state.height)

    def _become_ready(self, state: Ready) -> None:
        for loading in self.query("#loading"):
            loading.remove()
        self._pane = create_pane(state.width, state.height, self._content)
        self.query_one("#diff-body", Container).mount(self._pane)
        self._pane.focus()

    def _get_scroll_target(self) -> ScrollableContainer | None:
        return self._pane

    @property
    def state(self) -> SessionState:
        """Current session state."""
        return self._state

    @property
    def pane(self) -> DiffPane | None:
        """The diff pane, once the session is ready."""
        return self._pane
