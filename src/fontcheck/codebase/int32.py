"""
Fixed-width signed 32-bit arithmetic.

Python integers never overflow, so range arithmetic on font fields must check
the 32-bit bounds explicitly. Overflow raises instead of wrapping.
"""

from fontcheck.models.diagnostic import INT32_MAX, INT32_MIN


class ArithmeticOverflowError(OverflowError):
    """A 32-bit computation produced a result outside [INT32_MIN, INT32_MAX]."""


def _check_bounds(value: int, what: str) -> int:
    if not INT32_MIN <= value <= INT32_MAX:
        raise ArithmeticOverflowError(f"{what} = {value} does not fit in a signed 32-bit integer")
    return value


def widen_i32(value: int) -> int:
    """Widen a narrower integer field to int32; raises if it cannot be represented."""
    return _check_bounds(int(value), "widen")


def checked_mul_i32(a: int, b: int) -> int:
    """Multiply two int32 values, raising ArithmeticOverflowError instead of wrapping."""
    widen_i32(a)
    widen_i32(b)
    return _check_bounds(a * b, f"{a} * {b}")


def checked_abs_i32(value: int) -> int:
    # abs(INT32_MIN) is the one int32 value whose magnitude does not fit
    widen_i32(value)
    return _check_bounds(abs(value), f"abs({value})")
