"""Parsing of a single conversion specification in a format string.

A specification starts at ``%`` and is read in four steps: a run of
``0`` and ``-`` flags, a width (digits or ``*``), a precision (``.``
followed by digits or ``*``) and a conversion character from
:data:`SPECIFIERS`.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from .numbers import atoi
from .padding import int_length

__all__ = [
    "SPECIFIERS",
    "FLAG_NONE",
    "FLAG_ZERO",
    "FLAG_LEFT",
    "FormatSpec",
    "parse_spec",
]

SPECIFIERS = "cspdiuxX%"

FLAG_NONE = ""
FLAG_ZERO = "0"
FLAG_LEFT = "-"


@dataclass
class FormatSpec:
    """The parsed parts of one conversion specification.

    ``flag`` is :data:`FLAG_NONE`, :data:`FLAG_ZERO` or :data:`FLAG_LEFT`.
    ``precision`` is None when none was given. ``conversion`` is None when
    the specification ends without a known conversion character.
    """

    flag: str = FLAG_NONE
    width: int = 0
    precision: Optional[int] = None
    conversion: Optional[str] = None


def _char(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def _next_int(args: Optional[Iterator[Any]]) -> int:
    if args is None:
        raise TypeError("'*' needs an argument but none were given")
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for '*'") from None
    return operator.index(value)


def _parse_flags(text: str, pos: int) -> Tuple[str, int]:
    flag = FLAG_NONE
    while _char(text, pos) in (FLAG_ZERO, FLAG_LEFT):
        if text[pos] == FLAG_LEFT:
            flag = FLAG_LEFT
        elif flag != FLAG_LEFT:
            flag = FLAG_ZERO
        pos += 1
    return flag, pos


def _parse_width(
    text: str, pos: int, flag: str, args: Optional[Iterator[Any]]
) -> Tuple[int, str, int]:
    ch = _char(text, pos)
    if not ch:
        return 0, flag, pos
    if ch == "*":
        width = _next_int(args)
        if width < 0:
            width = -width
            flag = FLAG_LEFT
        return width, flag, pos + 1
    if ch != "." and ch not in SPECIFIERS:
        width = abs(atoi(text[pos:]))
        return width, flag, pos + int_length(width)
    return 0, flag, pos


def _parse_precision(
    text: str, pos: int, args: Optional[Iterator[Any]]
) -> Tuple[Optional[int], int]:
    if _char(text, pos) != ".":
        return None, pos
    pos += 1
    if _char(text, pos) == "0":
        pos += 1
    ch = _char(text, pos)
    if ch == "*":
        precision = _next_int(args)
        return (precision if precision >= 0 else None), pos + 1
    if not ("0" <= ch <= "9") or not ch:
        return 0, pos
    value = atoi(text[pos:])
    return (value if value >= 0 else None), pos + int_length(value)


def _parse_conversion(text: str, pos: int) -> Tuple[Optional[str], int]:
    ch = _char(text, pos)
    if not ch:
        return None, len(text)
    if ch in SPECIFIERS:
        return ch, pos + 1
    return None, min(pos + 2, len(text))


def parse_spec(
    text: str, index: int, args: Optional[Iterator[Any]] = None
) -> Tuple[FormatSpec, int]:
    """Parse the specification whose ``%`` is at ``text[index]``.

    ``args`` is an iterator from which ``*`` widths and precisions are
    taken. Returns the specification and the index just past it.
    """
    if not 0 <= index < len(text) or text[index] != "%":
        raise ValueError(f"no '%' at index {index} of {text!r}")
    pos = index + 1
    flag, pos = _parse_flags(text, pos)
    width, flag, pos = _parse_width(text, pos, flag, args)
    precision, pos = _parse_precision(text, pos, args)
    conversion, pos = _parse_conversion(text, pos)
    spec = FormatSpec(flag=flag, width=width, precision=precision, conversion=conversion)
    return spec, pos