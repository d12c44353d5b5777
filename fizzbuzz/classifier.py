"""Number classification and output line rendering."""

from __future__ import annotations

from collections.abc import Iterator

from .constants import (
    BUZZ_DIVISOR,
    BUZZ_LABEL,
    FIZZ_DIVISOR,
    FIZZ_LABEL,
    FIZZBUZZ_DIVISOR,
    FIZZBUZZ_LABEL,
    LINE_FORMAT,
)


def classify(number: int) -> str:
    """Return the display label for one number.

    Multiples of 15 are checked first since they are also multiples of 3
    and 5.

    Args:
        number: Integer to classify.

    Returns:
        "FizzBuzz", "Fizz", "Buzz", or the decimal form of ``number``.
    """
    if number % FIZZBUZZ_DIVISOR == 0:
        return FIZZBUZZ_LABEL
    if number % FIZZ_DIVISOR == 0:
        return FIZZ_LABEL
    if number % BUZZ_DIVISOR == 0:
        return BUZZ_LABEL
    return str(number)


def format_line(number: int) -> str:
    """Render ``<number>: <label>`` without a line terminator."""
    return LINE_FORMAT.format(number=number, label=classify(number))


def iter_lines(maximum: int) -> Iterator[str]:
    """Yield rendered lines for 1..maximum inclusive.

    Nothing is yielded when ``maximum`` is below 1.
    """
    for number in range(1, maximum + 1):
        yield format_line(number)
