"""Exceptions raised by stdio-utils."""

from __future__ import annotations

from typing import Optional


class StdioUtilsError(Exception):
    """Base class for all stdio-utils errors."""


class SumError(StdioUtilsError):
    """Summation failed; no partial sum is available."""


class InputError(SumError):
    """Reading the input failed, e.g. on non-UTF-8 data."""

    def __init__(self, source: BaseException):
        super().__init__("Could not read input")
        self.source = source

    def __str__(self) -> str:
        detail = str(self.source)
        if detail:
            return f"Could not read input: {detail}"
        return "Could not read input"


class ParsingError(SumError):
    """Parsing a line of input text as number failed."""

    def __init__(self, input: str, reason: str):
        super().__init__(input, reason)
        self.input = input
        self.reason = reason

    def __str__(self) -> str:
        return f'Could not parse "{self.input}" to number: {self.reason}'


class SumOverflowError(SumError):
    """The running total left the machine integer range."""

    def __init__(self, total: int, value: int):
        super().__init__(total, value)
        self.total = total
        self.value = value

    def __str__(self) -> str:
        return f"Sum overflowed adding {self.value} to {self.total}"


class BenchmarkError(StdioUtilsError):
    """Benchmark program failed or returned an unexpected result."""


class FixtureError(BenchmarkError):
    """Test data file could not be created or removed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


__all__ = [
    "BenchmarkError",
    "FixtureError",
    "InputError",
    "ParsingError",
    "StdioUtilsError",
    "SumError",
    "SumOverflowError",
]
