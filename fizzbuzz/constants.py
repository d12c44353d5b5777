"""Constants used across fizzbuzz modules."""

import re

DEFAULT_MAX = 100

FIZZ_DIVISOR = 3
BUZZ_DIVISOR = 5
FIZZBUZZ_DIVISOR = FIZZ_DIVISOR * BUZZ_DIVISOR

FIZZ_LABEL = "Fizz"
BUZZ_LABEL = "Buzz"
FIZZBUZZ_LABEL = FIZZ_LABEL + BUZZ_LABEL

# output line, without terminator
LINE_FORMAT = "{number}: {label}"

# strict base-10: optional sign then unicode decimal digits, no whitespace or underscores
INTEGER_PATTERN = re.compile(r"[+-]?\d+")

# accepted maximum range, 32-bit signed
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
