"""stdio-utils core business logic.

This module contains the summation logic separated from CLI presentation:
- summation: Parse lines as numbers and sum them
- streaming: Line stream utilities
"""

from .streaming import lines
from .summation import (
    NUMBER_MAX,
    NUMBER_MIN,
    checked_add,
    parse_number,
    read,
    sum,
    sum_strings,
)

__all__ = [
    "NUMBER_MAX",
    "NUMBER_MIN",
    "checked_add",
    "lines",
    "parse_number",
    "read",
    "sum",
    "sum_strings",
]
