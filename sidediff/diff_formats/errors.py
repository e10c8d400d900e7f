"""Exceptions raised while capturing and parsing diff input."""

from __future__ import annotations


class DiffInputError(Exception):
    """Base class for problems with the diff given on standard input."""


class InputParseError(DiffInputError):
    """The captured text is not well-formed unified diff."""


class InputReadError(DiffInputError):
    """Reading the input stream failed."""


class InputTimeoutError(DiffInputError):
    """The input stream did not finish within the configured timeout."""

    def __init__(self, timeout: float, lines_read: int) -> None:
        super().__init__(
            f"no end of input after {timeout:g}s ({lines_read} lines read)"
        )
        self.timeout = timeout
        self.lines_read = lines_read
