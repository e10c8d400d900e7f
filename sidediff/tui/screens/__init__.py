"""Screens for the TUI application."""

from sidediff.tui.screens.diff_screen import DiffScreen

__all__ = [
    "DiffScreen",
]
