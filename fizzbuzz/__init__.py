"""FizzBuzz printer with a configurable maximum."""

from .classifier import classify, format_line, iter_lines
from .cli import FizzBuzzApplication, main, parse_int, parse_max
from .constants import DEFAULT_MAX
from .errors import FizzBuzzError

__all__ = [
    "DEFAULT_MAX",
    "FizzBuzzApplication",
    "FizzBuzzError",
    "classify",
    "format_line",
    "iter_lines",
    "main",
    "parse_int",
    "parse_max",
]
