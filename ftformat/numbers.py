"""Conversions between decimal text and integers."""

from __future__ import annotations

import operator

__all__ = ["atoi", "itoa"]

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


def _is_space(ch: str) -> bool:
    return ch == " " or ord(ch) <= ord("\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading blanks and control characters up to carriage return are
    skipped, one optional sign is accepted, and digits are read until the
    first non-digit. Text with no digits gives 0. A value below the 32-bit
    signed range gives 0; one above it gives -1.
    """
    pos = 0
    length = len(text)
    while pos < length and _is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    if not digits:
        return 0
    value = sign * int(digits)
    if value < _INT_MIN:
        return 0
    if value > _INT_MAX:
        return -1
    return value


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    value = operator.index(n)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    return sign + str(abs(value))