"""Small helpers for building padded numeric text."""

from __future__ import annotations

import operator
from typing import Optional

__all__ = ["fill", "int_length", "hex_digits", "pad_to_precision"]


def fill(ch: str, count: int) -> str:
    """Return ``ch`` repeated ``count`` times; empty for a count below one."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch * max(count, 0)


def int_length(number: int) -> int:
    """Number of decimal digits in ``number``, not counting a sign."""
    value = abs(operator.index(number))
    length = 1
    while value >= 10:
        value //= 10
        length += 1
    return length


def hex_digits(number: int, uppercase: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, without prefix."""
    value = operator.index(number)
    if value < 0:
        raise ValueError(f"expected a non-negative number, got {value}")
    return format(value, "X" if uppercase else "x")


def pad_to_precision(digits: str, precision: Optional[int]) -> str:
    """Left-pad ``digits`` with zeros to ``precision`` digits.

    A leading ``-`` stays in front of the zeros and does not count toward
    the precision. With no precision the text is returned unchanged.
    """
    if precision is None:
        return digits
    sign, body = ("-", digits[1:]) if digits.startswith("-") else ("", digits)
    return sign + fill("0", precision - len(body)) + body