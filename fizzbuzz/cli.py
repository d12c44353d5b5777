"""fizzbuzz CLI entrypoint and print loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .classifier import iter_lines
from .constants import DEFAULT_MAX, INT_MAX, INT_MIN, INTEGER_PATTERN
from .errors import FizzBuzzError


def parse_int(text: str) -> int:
    """Parse strict base-10 integer text within the 32-bit signed range.

    Args:
        text: Raw argument text.

    Returns:
        Parsed integer.
    """
    if INTEGER_PATTERN.fullmatch(text) is None:
        raise FizzBuzzError(f"validation error: not a base-10 integer: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise FizzBuzzError(f"validation error: integer out of range: {text!r}")
    return value


def parse_max(args: Sequence[str]) -> int:
    """Resolve the inclusive maximum from CLI args.

    Only the first arg is considered. Missing or unparseable input falls
    back to ``DEFAULT_MAX``, including values outside the 32-bit signed
    range. Zero and negative values are returned as-is.

    Args:
        args: CLI args excluding program name.

    Returns:
        Inclusive upper bound for the print loop.
    """
    if not args:
        return DEFAULT_MAX
    try:
        return parse_int(args[0])
    except FizzBuzzError:
        return DEFAULT_MAX


class FizzBuzzApplication:
    """Runs the print loop against an output stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize application output.

        Args:
            stream: Output stream; resolved to ``sys.stdout`` at run time
                when omitted.
        """
        self._stream = stream

    def run(self, argv: Sequence[str]) -> int:
        """Run the CLI from argv.

        Args:
            argv: CLI args excluding program name.

        Returns:
            Exit status code.
        """
        stream = self._stream if self._stream is not None else sys.stdout
        maximum = parse_max(argv)
        for line in iter_lines(maximum):
            stream.write(line + "\n")
        stream.flush()
        return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Optional argv vector.

    Returns:
        Exit status code.
    """
    application = FizzBuzzApplication()
    return application.run(argv if argv is not None else sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
