"""Line stream utilities.

Turns text or binary streams into lazy line sequences, boundary stripped.
"""

from collections.abc import Iterator
from typing import IO, AnyStr


def lines(input_stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield lines from a text or binary stream without their boundary.

    Both ``\\n`` and ``\\r\\n`` are stripped. A last line without a
    terminator is yielded as is. Lines are read one at a time, so memory
    stays constant regardless of input size.

    Args:
        input_stream: Stream to read from (``str`` or ``bytes`` lines)
    """
    for line in input_stream:
        yield _strip_boundary(line)


def _strip_boundary(line: AnyStr) -> AnyStr:
    newline, carriage_return = ("\n", "\r") if isinstance(line, str) else (b"\n", b"\r")
    if line.endswith(newline):
        line = line[:-1]
        if line.endswith(carriage_return):
            line = line[:-1]
    return line
