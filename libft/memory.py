"""Byte-buffer operations on mutable bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

__all__ = ["memset", "bzero", "memcpy", "memccpy", "memmove", "memchr", "memcmp", "memalloc"]


def _check_length(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with the low byte of *c*."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first *n* bytes of *buf* to zero."""
    return memset(buf, 0, n)


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into *dst*."""
    _check_length(n, dst, src)
    if dst is not src:
        dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: Buffer, c: int, n: int) -> Optional[int]:
    """Copy bytes from *src* to *dst*, stopping after the first byte equal to *c*.

    Returns the offset in *dst* just past the copied *c*, or None if *c*
    was not found in the first *n* bytes (all of which are then copied).
    """
    _check_length(n, dst, src)
    chunk = bytes(src[:n])
    found = chunk.find(c & 0xFF)
    count = n if found < 0 else found + 1
    dst[:count] = chunk[:count]
    return None if found < 0 else count


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move *n* bytes within *buf* from offset *src* to offset *dst*; ranges may overlap."""
    if dst < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    _check_length(n, memoryview(buf)[dst:], memoryview(buf)[src:])
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to *c* within the first *n* bytes, or None."""
    _check_length(n, data)
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first *n* bytes as unsigned values.

    Returns the difference of the first differing pair, or 0 if all match.
    """
    _check_length(n, a, b)
    return next((x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y), 0)


def memalloc(size: int) -> Optional[bytearray]:
    """Return a zero-filled buffer of *size* bytes, or None when *size* is 0."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return None
    return bytearray(size)