"""Error types for fizzbuzz."""


class FizzBuzzError(RuntimeError):
    """Raised when fizzbuzz input cannot be interpreted."""
