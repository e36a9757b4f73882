"""Building new strings from existing ones: slicing, joining, trimming, splitting and mapping."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

__all__ = ["strsub", "strjoin", "strtrim", "strsplit", "strmap", "strmapi", "strlcat"]

_NUL = "\0"
_TRIM_CHARS = " \t\n"


def _terminated(s: str) -> str:
    """Return the part of *s* before its first NUL."""
    return s.partition(_NUL)[0]


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most *length* characters of *s* beginning at index *start*.

    A missing or empty *s* gives None.  The copy stops early at the end of
    the string or at a NUL.
    """
    if not s:
        return None
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(s):
        raise IndexError(f"start {start} lies beyond string of length {len(s)}")
    return _terminated(s[start:start + length])


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent, both missing give None."""
    if s1 is None and s2 is None:
        return None
    return _terminated(s1 or "") + _terminated(s2 or "")


def strtrim(s: Optional[str]) -> Optional[str]:
    """Remove leading and trailing spaces, tabs and newlines; None gives None."""
    if s is None:
        return None
    return _terminated(s).strip(_TRIM_CHARS)


def strsplit(s: Optional[str], c: str) -> Optional[List[str]]:
    """Split *s* on the separator character *c*, dropping empty fields; None gives None."""
    if s is None:
        return None
    if len(c) != 1:
        raise ValueError(f"expected a single separator character, got {c!r}")
    return [word for word in _terminated(s).split(c) if word]


def strmap(s: Optional[str], func: Callable[[str], str]) -> Optional[str]:
    """Apply *func* to every character of *s*; a missing or empty *s* gives None."""
    text = _terminated(s) if s else ""
    if not text:
        return None
    return "".join(func(ch) for ch in text)


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Apply *func* to every index and character of *s*; a missing or empty *s* gives None."""
    text = _terminated(s) if s else ""
    if not text:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append *src* to *dst* as if *dst* lived in a buffer of *dstsize* characters.

    Returns the resulting string and the length the full result would have
    had: the length of *src* plus the length of *dst*, the latter capped at
    *dstsize*.  Nothing is appended when *dst* already fills the buffer.
    """
    _check_non_negative("dstsize", dstsize)
    src = _terminated(src)
    if dstsize == 0:
        return dst, len(src)
    dst = _terminated(dst)
    dst_len = min(len(dst), dstsize)
    room = max(0, dstsize - 1 - dst_len)
    return dst + src[:room], len(src) + dst_len