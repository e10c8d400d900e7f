"""Mixins for the TUI application."""

from sidediff.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "VimNavigationMixin",
]
