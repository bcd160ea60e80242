"""stdio-utils: sum numbers read from a stream of lines, such as stdin."""

from .core import sum, sum_strings
from .errors import InputError, ParsingError, SumError, SumOverflowError

__all__ = [
    "InputError",
    "ParsingError",
    "SumError",
    "SumOverflowError",
    "__version__",
    "sum",
    "sum_strings",
]

__version__ = "0.1.0"
