"""
Capture unified diff text from a stream.

Input ends at the first blank line or at end of stream, whichever comes
first. A blank first line therefore yields an empty buffer, and diffs that
contain blank lines are cut at the first one.
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import time
from typing import IO, Iterator

from sidediff.diff_formats.errors import InputReadError, InputTimeoutError

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096


def _is_blank(line: str) -> bool:
    return line.rstrip("\r\n") == ""


def _iter_stream_lines(stream: IO[str]) -> Iterator[str]:
    """Yield lines from a text stream, blocking until each one arrives."""
    while True:
        try:
            line = stream.readline()
        except OSError as e:
            raise InputReadError(f"failed to read input: {e}") from e
        if not line:
            return
        yield line


def _iter_fd_lines(fd: int, timeout: float) -> Iterator[str]:
    """Yield lines read from a file descriptor within a total time budget.

    Reads raw bytes so that no data sits in a Python-level buffer where
    select() cannot see it.
    """
    deadline = time.monotonic() + timeout
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    pending = ""
    lines_read = 0

    while True:
        newline = pending.find("\n")
        if newline != -1:
            line, pending = pending[: newline + 1], pending[newline + 1 :]
            lines_read += 1
            yield line
            continue

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise InputTimeoutError(timeout, lines_read)
        try:
            ready, _, _ = select.select([fd], [], [], remaining)
            if not ready:
                raise InputTimeoutError(timeout, lines_read)
            chunk = os.read(fd, READ_CHUNK_SIZE)
        except OSError as e:
            raise InputReadError(f"failed to read input: {e}") from e

        if not chunk:
            pending += decoder.decode(b"", final=True)
            if pending:
                yield pending
            return
        pending += decoder.decode(chunk)


def read_diff_text(stream: IO[str], timeout: float | None = None) -> str:
    """Read diff text until a blank line or end of stream.

    Args:
        stream: Text stream to read from (normally sys.stdin).
        timeout: Optional total number of seconds to wait for the input to
            end. None waits forever.

    Returns:
        The captured lines, each terminated by a single "\\n".

    Raises:
        InputReadError: If the stream cannot be read.
        InputTimeoutError: If the timeout elapses first.
    """
    if timeout is None:
        lines = _iter_stream_lines(stream)
    else:
        try:
            fd = stream.fileno()
        except (AttributeError, OSError) as e:
            raise InputReadError(
                f"a read timeout needs a stream backed by a file descriptor: {e}"
            ) from e
        lines = _iter_fd_lines(fd, timeout)

    captured: list[str] = []
    for line in lines:
        if _is_blank(line):
            logger.debug("Blank line after %d lines, input capture stopped", len(captured))
            break
        captured.append(line.rstrip("\r\n") + "\n")
    else:
        logger.debug("End of stream after %d lines", len(captured))

    return "".join(captured)
