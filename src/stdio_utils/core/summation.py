"""Sum numbers read from a stream of strings, such as stdin.

    >>> sum_strings(["20", "22"])
    42

Two call shapes are supported:

- ``sum_strings``: every item is already text (``str`` or UTF-8 ``bytes``).
- ``sum``: items may also be input failures, either placed in the sequence
  as exception instances or raised by the iterator itself (a live reader
  hitting an ``OSError`` or undecodable bytes).

Both stop at the first failure and raise; no partial sum is returned.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import Union

from ..errors import InputError, ParsingError, SumOverflowError

Number = int
Text = Union[str, bytes, bytearray]
LineItem = Union[Text, BaseException]

# Signed 64-bit machine integer
NUMBER_MIN: Number = -(2**63)
NUMBER_MAX: Number = 2**63 - 1

INVALID_DIGIT = "invalid digit found in string"
EMPTY_INPUT = "cannot parse integer from empty string"
POS_OVERFLOW = "number too large to fit in target type"
NEG_OVERFLOW = "number too small to fit in target type"

_NUMBER = re.compile(r"[+-]?[0-9]+")

# Unicode White_Space; str.strip() would also drop U+001C..U+001F
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def sum_strings(strings: Iterable[Text]) -> Number:
    """Parse a stream of text values as numbers and return their sum.

    Args:
        strings: Iterable of ``str``/``bytes`` lines

    Returns:
        Sum of all parsed values (0 for an empty stream)

    Raises:
        ParsingError: A line is not a decimal integer
        SumOverflowError: The sum does not fit the machine integer range
        TypeError: An item is not text

    See also:
        sum: Variant that accepts input failures as items
    """
    return sum(_require_text(item) for item in strings)


def sum(lines: Iterable[LineItem]) -> Number:
    """Parse a stream of lines or input failures and return their sum.

    Failures passed as input are wrapped and propagated:

        >>> sum([OSError("Mock Error")])
        Traceback (most recent call last):
        ...
        stdio_utils.errors.InputError: Could not read input: Mock Error

    Raises:
        InputError: An item is a failure, cannot be decoded, or pulling it failed
        ParsingError: A line is not a decimal integer
        SumOverflowError: The sum does not fit the machine integer range

    See also:
        sum_strings: Variant for error-free input
    """
    total: Number = 0
    for line in read(lines):
        total = checked_add(total, parse_number(line))
    return total


def read(lines: Iterable[LineItem]) -> Iterator[str]:
    """Yield each item as text, turning input failures into InputError."""
    iterator = iter(lines)
    while True:
        try:
            item = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeError) as exc:
            raise InputError(exc) from exc
        yield _as_text(item)


def parse_number(line: str) -> Number:
    """Parse one trimmed line as a signed decimal integer.

    The offending text is kept untrimmed in the raised ParsingError.
    """
    text = line.strip(WHITESPACE)
    if not text:
        raise ParsingError(line, EMPTY_INPUT)
    if not _NUMBER.fullmatch(text):
        raise ParsingError(line, INVALID_DIGIT)

    value = int(text)
    if value > NUMBER_MAX:
        raise ParsingError(line, POS_OVERFLOW)
    if value < NUMBER_MIN:
        raise ParsingError(line, NEG_OVERFLOW)
    return value


def checked_add(total: Number, value: Number) -> Number:
    """Add value to total, raising SumOverflowError outside the number range."""
    result = total + value
    if result > NUMBER_MAX or result < NUMBER_MIN:
        raise SumOverflowError(total, value)
    return result


def _as_text(item: LineItem) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, (bytes, bytearray)):
        try:
            return item.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputError(exc) from exc
    if isinstance(item, BaseException):
        raise InputError(item) from item
    raise TypeError(f"Expected text or exception, got {type(item).__name__}")


def _require_text(item: Text) -> Text:
    if not isinstance(item, (str, bytes, bytearray)):
        raise TypeError(f"Expected text, got {type(item).__name__}")
    return item
