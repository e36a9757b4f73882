"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from libft.numbers import itoa

__all__ = ["putchar", "putstr", "putendl", "putnbr", "print_digits"]

_DIGITS = "0123456789"


def _stream(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def putchar(c: str, file: Optional[TextIO] = None) -> None:
    """Write the single character *c* to *file* (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(file).write(c)


def putstr(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write *s* to *file*; None writes nothing."""
    if s:
        _stream(file).write(s)


def putendl(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write *s* followed by a newline to *file*."""
    out = _stream(file)
    putstr(s, out)
    out.write("\n")


def putnbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write the signed 32-bit integer *n* in decimal to *file*."""
    _stream(file).write(itoa(n))


def print_digits(file: Optional[TextIO] = None) -> None:
    """Write the digits 0 to 9 to *file*."""
    _stream(file).write(_DIGITS)