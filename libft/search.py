"""String length, searching and comparison.

Strings end at their last character or at the first NUL, whichever comes
first.  Positions are returned as indices, and None stands for "not found".
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterable, Iterator, Optional, Tuple, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strstr",
    "strnstr",
    "strcmp",
    "strncmp",
    "strequ",
    "strnequ",
]

_NUL = "\0"


def _char(ch: Union[int, str]) -> str:
    """Return *ch* as a one-character string."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, int):
        return chr(ch & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(ch).__name__}")


def _terminated(s: str) -> str:
    """Return the part of *s* before its first NUL."""
    cut = s.find(_NUL)
    return s if cut < 0 else s[:cut]


def strlen(s: Optional[str]) -> int:
    """Return the length of *s* up to its first NUL; None counts as empty."""
    if s is None:
        return 0
    return len(_terminated(s))


def strchr(s: str, ch: Union[int, str]) -> Optional[int]:
    """Return the index of the first *ch* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    target = _char(ch)
    text = _terminated(s)
    if target == _NUL:
        return len(text)
    found = text.find(target)
    return None if found < 0 else found


def strrchr(s: str, ch: Union[int, str]) -> Optional[int]:
    """Return the index of the last *ch* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    target = _char(ch)
    text = _terminated(s)
    if target == _NUL:
        return len(text)
    found = text.rfind(target)
    return None if found < 0 else found


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Return the index of the first occurrence of *needle*, or None.

    An empty needle is found at index 0.
    """
    needle = _terminated(needle)
    if not needle:
        return 0
    found = _terminated(haystack).find(needle)
    return None if found < 0 else found


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie within the first *n* characters."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    needle = _terminated(needle)
    if not needle:
        return 0
    found = _terminated(haystack).find(needle, 0, n)
    return None if found < 0 else found


def _pairs(s1: str, s2: str) -> Iterator[Tuple[str, str]]:
    return zip_longest(s1, s2, fillvalue=_NUL)


def _compare(pairs: Iterable[Tuple[str, str]]) -> int:
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings.

    Returns the code difference of the first differing characters, the end of
    a string counting as code 0, or 0 if the strings are equal.
    """
    return _compare(_pairs(s1, s2))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first *n* characters of two strings, as :func:`strcmp`."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    return _compare(islice(_pairs(s1, s2), n))


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return strcmp(s1, s2) == 0


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are given and their first *n* characters are equal."""
    if s1 is None or s2 is None:
        return False
    return strncmp(s1, s2, n) == 0