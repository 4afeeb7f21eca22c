"""Signed integer contract of an expression engine.

All operands and results are signed 32-bit integers with two's complement wrapping.
"""

INTEGER_BITS = 32

_MASK = (1 << INTEGER_BITS) - 1
_SIGN_BIT = 1 << (INTEGER_BITS - 1)

# Shift counts are taken modulo integer width (only low bits are used)
SHIFT_COUNT_MASK = INTEGER_BITS - 1


def wrap_integer(value: int) -> int:
    """Wrap arbitrary Python integer into signed integer range with two's complement."""
    value &= _MASK
    if value & _SIGN_BIT:
        return value - (1 << INTEGER_BITS)
    return value


def truncating_divide(dividend: int, divisor: int) -> int:
    """Divide rounding toward zero (C semantics) instead of Python floor division."""
    assert divisor != 0
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return wrap_integer(quotient)


def truncating_remainder(dividend: int, divisor: int) -> int:
    """Remainder that takes sign of an dividend (C semantics)."""
    assert divisor != 0
    return wrap_integer(dividend - truncating_divide(dividend, divisor) * divisor)


# Digits converted at once, far below interpreter limit of an integer string conversion
_DECIMAL_CHUNK_DIGITS = 9


def parse_wrapping_decimal(digits: str) -> int:
    """Convert decimal digits of any length into signed integer, wrapping as arithmetic does.

    Numerals wider than integer range are reduced modulo 2**32, so `4294967297` reads as `1`.
    """
    assert digits.isascii() and digits.isdigit(), "Expected only decimal digits"
    value = 0
    for start in range(0, len(digits), _DECIMAL_CHUNK_DIGITS):
        chunk = digits[start : start + _DECIMAL_CHUNK_DIGITS]
        value = (value * 10 ** len(chunk) + int(chunk)) & _MASK
    return wrap_integer(value)
