"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
import sys
from typing import Optional, TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write one character; return the number of characters written."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)
    return 1


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s``; a None string writes nothing. Return the count written."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s`` followed by a newline; a None string writes nothing."""
    if s is None:
        return 0
    _target(stream).write(s + "\n")
    return len(s) + 1


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal form of an integer; return the count written."""
    text = str(operator.index(n))
    _target(stream).write(text)
    return len(text)