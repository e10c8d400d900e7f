"""sidediff: a terminal viewer for unified diffs read from standard input."""

__version__ = "0.1.0"
