"""
Vim Navigation Mixin for scrolling the diff pane.

Provides j/k/g/G keys that delegate to the pane's native scroll methods.
All other navigation keys (arrows, page up/down, home/end) are handled by
the pane's own VerticalScroll bindings.
"""

from __future__ import annotations

from textual.binding import Binding
from textual.containers import ScrollableContainer


class VimNavigationMixin:
    """Mixin providing vim-style scrolling keybindings.

    Subclasses must implement _get_scroll_target() to return the widget
    that should scroll, or None while there is nothing to scroll.

    Usage:
        class MyScreen(VimNavigationMixin, Screen):
            BINDINGS = VimNavigationMixin.VIM_BINDINGS + [...]
    """

    VIM_BINDINGS = [
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
    ]

    def _get_scroll_target(self) -> ScrollableContainer | None:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _get_scroll_target()"
        )

    def action_vim_down(self) -> None:
        """Scroll down one line (vim j key)."""
        target = self._get_scroll_target()
        if target is not None:
            target.scroll_down(animate=False)

    def action_vim_up(self) -> None:
        """Scroll up one line (vim k key)."""
        target = self._get_scroll_target()
        if target is not None:
            target.scroll_up(animate=False)

    def action_vim_top(self) -> None:
        """Jump to the first line (vim g)."""
        target = self._get_scroll_target()
        if target is not None:
            target.scroll_home(animate=False)

    def action_vim_bottom(self) -> None:
        """Jump to the last line (vim G)."""
        target = self._get_scroll_target()
        if target is not None:
            target.scroll_end(animate=False)
