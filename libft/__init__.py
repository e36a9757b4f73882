"""Helpers for characters, numbers, byte buffers, strings, output, a linked list and line reading."""

__version__ = "0.1.0"
__all__ = [
    "ctype",
    "numbers",
    "memory",
    "search",
    "output",
    "transform",
    "linked",
    "linereader",
]