"""
Terminal attachment for the interactive session.

The diff arrives on standard input, so by the time the session starts
stdin is an exhausted pipe. Keyboard input has to come from the
controlling terminal instead.
"""

from __future__ import annotations

import os
import sys

CONTROLLING_TERMINAL = "/dev/tty"


class SessionStartError(Exception):
    """The interactive terminal session cannot be initialized."""


def attach_terminal(tty_path: str = CONTROLLING_TERMINAL) -> None:
    """Point file descriptor 0 at the controlling terminal.

    Does nothing when stdin already is a terminal.

    Raises:
        SessionStartError: If stdout is not a terminal or the controlling
            terminal cannot be opened.
    """
    if sys.__stdout__ is None or not sys.__stdout__.isatty():
        raise SessionStartError("standard output is not a terminal")

    if sys.__stdin__ is not None and sys.__stdin__.isatty():
        return

    try:
        fd = os.open(tty_path, os.O_RDONLY)
    except OSError as e:
        raise SessionStartError(f"cannot open {tty_path}: {e.strerror}") from e
    try:
        os.dup2(fd, 0)
    except OSError as e:
        raise SessionStartError(f"cannot attach {tty_path} to stdin: {e.strerror}") from e
    finally:
        os.close(fd)
