"""Arithmetic on 32-bit signed integers without the usual operators."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MASK = 0xFFFFFFFF


def divide(dividend: int, divisor: int) -> int:
    """Quotient truncated toward zero, clamped to the 32-bit range."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return max(INT_MIN, min(INT_MAX, quotient))


def is_power_of_three(n: int) -> bool:
    """Tell whether ``n`` is ``3 ** k`` for some ``k >= 0``."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def add_bitwise(a: int, b: int) -> int:
    """Sum of two 32-bit integers using only bit operations, wrapping on overflow."""
    a &= _MASK
    b &= _MASK
    while b:
        a, b = (a ^ b) & _MASK, ((a & b) << 1) & _MASK
    return a if a <= INT_MAX else ~(a ^ _MASK)


def power(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated squaring."""
    result = 1.0
    remaining = abs(n)
    while remaining:
        if remaining & 1:
            result = result * x if n > 0 else result / x
        x *= x
        remaining >>= 1
    return result


def reverse_digits(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    if x in (INT_MIN, INT_MAX):
        return 0
    reversed_value = int(str(abs(x))[::-1])
    if x < 0:
        reversed_value = -reversed_value
    if not INT_MIN <= reversed_value <= INT_MAX:
        return 0
    return reversed_value


def parse_int(s: str) -> int:
    """Read a leading integer the way ``atoi`` does, clamped to the 32-bit range.

    Leading spaces are skipped, one sign is allowed, and reading stops at the
    first character that is not a digit. No digits give 0.
    """
    text = s.lstrip(" ")
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    digits = []
    for char in text:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    if negative:
        value = -value
    return max(INT_MIN, min(INT_MAX, value))