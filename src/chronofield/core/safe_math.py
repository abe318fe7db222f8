"""Checked 64-bit arithmetic.

Python integers never overflow, but field values travel as signed 64-bit
longs, so sums are bounded explicitly before any modulo reduction.
"""

from __future__ import annotations

from chronofield.core.constants import LONG_MAX, LONG_MIN
from chronofield.core.errors import ArithmeticOverflowError


def _checked(result: int, expression: str) -> int:
    if result < LONG_MIN or result > LONG_MAX:
        raise ArithmeticOverflowError(f"Addition overflows a long: {expression}")
    return result


def safe_add(a: int, b: int) -> int:
    """Add two longs.

    Raises:
        ArithmeticOverflowError: If the sum does not fit in a signed long.
    """
    return _checked(a + b, f"{a} + {b}")


def safe_subtract(a: int, b: int) -> int:
    """Subtract two longs.

    Raises:
        ArithmeticOverflowError: If the difference does not fit in a signed long.
    """
    return _checked(a - b, f"{a} - {b}")


def safe_multiply(a: int, b: int) -> int:
    """Multiply two longs.

    Raises:
        ArithmeticOverflowError: If the product does not fit in a signed long.
    """
    return _checked(a * b, f"{a} * {b}")
