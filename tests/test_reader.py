"""Tests for input capture in sidediff/diff_formats/reader.py."""

from __future__ import annotations

import io
import os
from typing import Iterator

import pytest

from sidediff.diff_formats import (
    InputReadError,
    InputTimeoutError,
    parse_diff,
    read_diff_text,
)


@pytest.fixture
def pipe() -> Iterator[tuple[io.TextIOWrapper, int]]:
    """Yield (read stream, write fd) of an OS pipe."""
    read_fd, write_fd = os.pipe()
    stream = os.fdopen(read_fd, "r")
    try:
        yield stream, write_fd
    finally:
        stream.close()
        try:
            os.close(write_fd)
        except OSError:
            pass


class TestReadUntilEnd:
    """Tests for reading without a timeout."""

    def test_reads_to_end_of_stream(self, simple_hunk):
        """All lines are captured when no blank line occurs."""
        assert read_diff_text(io.StringIO(simple_hunk)) == simple_hunk

    def test_stops_at_blank_line(self):
        """Capture stops at the first blank line."""
        stream = io.StringIO("@@ -1 +1 @@\n-a\n+b\n\n@@ -5 +5 @@\n-c\n+d\n")
        assert read_diff_text(stream) == "@@ -1 +1 @@\n-a\n+b\n"

    def test_blank_first_line_gives_empty_buffer(self):
        """A blank first line ends capture immediately."""
        stream = io.StringIO("\n@@ -1 +1 @@\n-a\n+b\n")
        raw = read_diff_text(stream)
        assert raw == ""
        assert parse_diff(raw).files == ()

    def test_single_space_line_is_not_blank(self):
        """A context line for an empty source line is kept."""
        stream = io.StringIO("@@ -1,2 +1,2 @@\n \n a\n")
        assert read_diff_text(stream) == "@@ -1,2 +1,2 @@\n \n a\n"

    def test_missing_final_newline_is_added(self):
        """The last line gets a terminator even if the stream lacks one."""
        assert read_diff_text(io.StringIO("-a\n+b")) == "-a\n+b\n"

    def test_crlf_line_endings_are_normalized(self):
        """Windows line endings are captured as plain newlines."""
        assert read_diff_text(io.StringIO("-a\r\n+b\r\n")) == "-a\n+b\n"

    def test_crlf_blank_line_stops_capture(self):
        """A blank line with a CRLF terminator still ends capture."""
        assert read_diff_text(io.StringIO("-a\r\n\r\n+b\r\n")) == "-a\n"

    def test_empty_stream(self):
        """An empty stream gives an empty buffer."""
        assert read_diff_text(io.StringIO("")) == ""


class TestReadWithTimeout:
    """Tests for reading with a timeout."""

    def test_reads_available_input(self, pipe):
        """Input that ends in time is returned as usual."""
        stream, write_fd = pipe
        os.write(write_fd, b"-foo\n+bar\n")
        os.close(write_fd)

        assert read_diff_text(stream, timeout=5) == "-foo\n+bar\n"

    def test_blank_line_ends_before_timeout(self, pipe):
        """A blank line ends capture even though the writer stays open."""
        stream, write_fd = pipe
        os.write(write_fd, b"-foo\n\n")

        assert read_diff_text(stream, timeout=5) == "-foo\n"

    def test_stalled_input_times_out(self, pipe):
        """A writer that never finishes raises InputTimeoutError."""
        stream, write_fd = pipe
        os.write(write_fd, b"-foo\n")

        with pytest.raises(InputTimeoutError) as excinfo:
            read_diff_text(stream, timeout=0.05)

        assert excinfo.value.lines_read == 1
        assert excinfo.value.timeout == 0.05

    def test_utf8_split_across_reads(self, pipe):
        """Multi-byte characters are decoded correctly."""
        stream, write_fd = pipe
        data = "+café\n".encode("utf-8")
        os.write(write_fd, data[:4])
        os.write(write_fd, data[4:])
        os.close(write_fd)

        assert read_diff_text(stream, timeout=5) == "+café\n"

    def test_stream_without_descriptor(self):
        """A timeout needs a real file descriptor."""
        with pytest.raises(InputReadError):
            read_diff_text(io.StringIO("-a\n"), timeout=1)
