"""TUI widgets for the diff viewer."""

from sidediff.tui.widgets.diff_pane import DiffPane, create_pane, resize_pane

__all__ = [
    "DiffPane",
    "create_pane",
    "resize_pane",
]
