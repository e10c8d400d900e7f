"""
Display session state machine.

The session starts in Initializing and moves to Ready the first time the
terminal size is known. Later size changes only update the pane
dimensions held by Ready.
"""

from __future__ import annotations

from dataclasses import dataclass

# Rows reserved above and below the pane for the header and footer
HEADER_HEIGHT = 3
FOOTER_HEIGHT = 3


@dataclass(frozen=True)
class Initializing:
    """Waiting for the first terminal size."""


@dataclass(frozen=True)
class Ready:
    """Pane established with the given dimensions."""

    width: int
    height: int


SessionState = Initializing | Ready


def pane_size(terminal_width: int, terminal_height: int) -> tuple[int, int]:
    """Return (width, height) of the pane for a terminal of the given size.

    The pane takes half the terminal width and the height left over after
    the header and footer, never less than one cell in either direction.
    """
    width = max(1, terminal_width // 2)
    height = max(1, terminal_height - (HEADER_HEIGHT + FOOTER_HEIGHT))
    return width, height


def next_state(state: SessionState, terminal_width: int, terminal_height: int) -> Ready:
    """Apply a terminal size event to the session state.

    Both Initializing and Ready move to a Ready carrying the new pane size;
    the caller tells the two apart by the state it passed in.
    """
    width, height = pane_size(terminal_width, terminal_height)
    return Ready(width=width, height=height)
