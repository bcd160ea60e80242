"""Tests for line stream utilities."""

import io

from stdio_utils.core.streaming import lines
from stdio_utils.core.summation import sum


def test_lines_strips_boundaries_from_bytes():
    stream = io.BytesIO(b"1\n2\r\n3")
    assert list(lines(stream)) == [b"1", b"2", b"3"]


def test_lines_strips_boundaries_from_text():
    stream = io.StringIO("a\nb\n")
    assert list(lines(stream)) == ["a", "b"]


def test_lines_keeps_other_whitespace():
    stream = io.StringIO(" 1 \n\t2\r\n")
    assert list(lines(stream)) == [" 1 ", "\t2"]


def test_lines_of_empty_stream():
    assert list(lines(io.BytesIO(b""))) == []


def test_blank_line_is_kept():
    assert list(lines(io.StringIO("1\n\n2\n"))) == ["1", "", "2"]


def test_sum_over_binary_stream():
    stream = io.BytesIO(b"20\r\n22\n")
    assert sum(lines(stream)) == 42
