"""Integer parsing, formatting and exact integer square roots."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "int_sqrt"]

_WHITESPACE = " \t\n\v\f\r"
_UNSIGNED_MASK = (1 << 64) - 1
_POSITIVE_LIMIT = 9223372036854775807
_NEGATIVE_LIMIT = 9223372036854775808
_INT_MIN = -2147483648
_INT_MAX = 2147483647
_SQRT_LIMIT = 46340 * 46340


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > _INT_MAX else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, then a single '-' or '+' is accepted.
    Parsing stops at the first non-digit. A magnitude above the signed
    64-bit range gives -1 for positive input and 0 for negative input;
    otherwise the result wraps to a signed 32-bit integer.
    """
    text = s.lstrip(_WHITESPACE)
    negative = text.startswith("-")
    if negative or text.startswith("+"):
        text = text[1:]

    magnitude = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        magnitude = (magnitude * 10 + ord(ch) - ord("0")) & _UNSIGNED_MASK
        if not negative and magnitude > _POSITIVE_LIMIT:
            return -1
        if negative and magnitude > _NEGATIVE_LIMIT:
            return 0
    return _to_int32(-magnitude if negative else magnitude)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def int_sqrt(nb: int) -> int:
    """Return the integer square root of a perfect square, otherwise 0.

    Only roots strictly smaller than *nb* are found, so 0 and 1 both give 0,
    and values above 46340 squared give 0.
    """
    if nb <= 0 or nb > _SQRT_LIMIT:
        return 0
    for root in range(nb):
        square = root * root
        if square == nb:
            return root
        if square > nb:
            break
    return 0