#
# PROJECT: vex-math
# MODULE: vex_math/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

# Single-precision machine epsilon; magnitudes at or below this are treated as zero.
EPSILON = 1.1920929e-07


def is_valid(x: float) -> bool:
    """True when x is a finite number (not NaN, not +/-inf)."""
    return not (math.isnan(x) or math.isinf(x))


def next_power_of_two(x: int) -> int:
    """
    Next power of two above x.

    Smears the highest set bit down through a 32-bit word and adds one, so
    an exact power of two maps to the following one (2 -> 4).
    """
    r = x
    r |= r >> 1
    r |= r >> 2
    r |= r >> 4
    r |= r >> 8
    r |= r >> 16
    return r + 1


def is_power_of_two(x: int) -> bool:
    return x > 0 and (x & (x - 1)) == 0


def sign(x: float) -> float:
    """Returns 1.0 or -1.0 depending on the sign of x (zero counts as positive)."""
    if x >= 0.0:
        return 1.0
    return -1.0


def divide(numerator: float, denominator: float) -> float:
    """
    numerator / denominator with IEEE 754 results for a zero denominator.

    x / 0 gives +/-inf with the sign taken from both operands (so -0.0 counts
    as negative), and 0 / 0 or nan / 0 gives nan, instead of raising
    ZeroDivisionError. Degenerate transforms built this way can then be
    caught with is_valid().
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
