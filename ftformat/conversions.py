"""Rendering of single conversions for the formatter.

Each ``render_*`` function takes a parsed :class:`~ftformat.spec.FormatSpec`
and a value and returns a :class:`Rendered`: the text produced and the
count the formatter adds to its total. The two agree for ordinary
specifications; a few odd flag combinations produce a count that differs
from the length of the text, and those are kept as they are.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Optional, Union

from .padding import fill, hex_digits, int_length
from .spec import FLAG_LEFT, FLAG_NONE, FLAG_ZERO, FormatSpec

__all__ = [
    "Rendered",
    "render_char",
    "render_int",
    "render_unsigned",
    "render_hex",
    "render_pointer",
    "render_string",
    "render_percent",
]

_NULL_STRING = "(null)"
_POINTER_PREFIX = "0x"


@dataclass(frozen=True)
class Rendered:
    """Text produced by one conversion and the count it reports."""

    text: str
    length: int

    def __str__(self) -> str:
        return self.text


def _to_int32(value: int) -> int:
    raw = operator.index(value) & 0xFFFFFFFF
    return raw - (1 << 32) if raw >= (1 << 31) else raw


def _negate32(value: int) -> int:
    return _to_int32(-value)


def _to_uint32(value: int) -> int:
    return operator.index(value) & 0xFFFFFFFF


def _precision(spec: FormatSpec) -> int:
    return -1 if spec.precision is None else spec.precision


def _numeric_flag(spec: FormatSpec) -> str:
    """A precision cancels the zero flag for numeric conversions."""
    if spec.precision is not None and spec.flag != FLAG_LEFT:
        return FLAG_NONE
    return spec.flag


def render_char(spec: FormatSpec, value: Union[str, int]) -> Rendered:
    """Render ``%c``: one character padded with spaces to the width."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        ch = value
    else:
        ch = chr(operator.index(value) & 0xFF)
    width = spec.width
    if width < 1:
        return Rendered(ch, 1)
    padding = fill(" ", width - 1)
    if spec.flag == FLAG_LEFT:
        return Rendered(ch + padding, width)
    return Rendered(padding + ch, width)


def _int_fill_then_number(num: int, flag: str, width: int) -> Rendered:
    parts = []
    if num < 0:
        if flag == FLAG_ZERO:
            parts.append("-")
            num = _negate32(num)
            parts.append(fill("0", width - int_length(num) - 1))
        elif flag == FLAG_NONE:
            parts.append(fill(" ", width - int_length(num) - 1))
    elif flag == FLAG_ZERO:
        parts.append(fill("0", width - int_length(num)))
    elif flag == FLAG_NONE:
        parts.append(fill(" ", width - int_length(num)))
    parts.append(str(num))
    return Rendered("".join(parts), width)


def _int_number_then_fill(num: int, width: int) -> Rendered:
    digits = int_length(num)
    extra = 1 if num < 0 else 0
    return Rendered(str(num) + fill(" ", width - digits - extra), width)


def _int_precision_only(num: int, precision: int) -> Rendered:
    if num < 0:
        num = _negate32(num)
        text = "-" + fill("0", precision - int_length(num)) + str(num)
        return Rendered(text, precision + 1)
    return Rendered(fill("0", precision - int_length(num)) + str(num), precision)


def _int_width_and_precision(num: int, flag: str, width: int, precision: int) -> Rendered:
    if flag == FLAG_LEFT:
        if num < 0:
            num = _negate32(num)
            text = (
                "-"
                + fill("0", precision - int_length(num))
                + str(num)
                + fill(" ", width - precision - 1)
            )
        else:
            text = (
                fill("0", precision - int_length(num))
                + str(num)
                + fill(" ", width - precision)
            )
        return Rendered(text, width)
    if num < 0:
        lead = fill(" ", width - precision - 1) + "-"
        num = _negate32(num)
        text = lead + fill("0", precision - int_length(num)) + str(num)
    elif flag == FLAG_NONE:
        text = (
            fill(" ", width - precision)
            + fill("0", precision - int_length(num))
            + str(num)
        )
    else:
        text = ""
    return Rendered(text, width)


def render_int(spec: FormatSpec, value: int) -> Rendered:
    """Render ``%d`` and ``%i`` for a 32-bit signed integer."""
    num = _to_int32(value)
    flag = _numeric_flag(spec)
    width = spec.width
    precision = _precision(spec)
    digits = int_length(num)
    if precision == 0 and num == 0 and width == 0:
        return Rendered("", 0)
    if precision == 0 and num == 0 and width > 0:
        return Rendered(fill(" ", width), width)
    if width <= digits and precision <= digits:
        text = str(num)
        return Rendered(text, len(text))
    if width >= digits and precision <= digits:
        if flag in (FLAG_ZERO, FLAG_NONE):
            return _int_fill_then_number(num, flag, width)
        return _int_number_then_fill(num, width)
    if width <= precision and precision >= digits:
        return _int_precision_only(num, precision)
    return _int_width_and_precision(num, flag, width, precision)


def render_unsigned(spec: FormatSpec, value: int) -> Rendered:
    """Render ``%u`` for a 32-bit unsigned integer."""
    num = _to_uint32(value)
    flag = _numeric_flag(spec)
    width = spec.width
    precision = _precision(spec)
    text = str(num)
    digits = len(text)
    if precision == 0 and num == 0 and width >= 0:
        return Rendered(fill(" ", width), width)
    if width <= digits and precision <= digits:
        return Rendered(text, digits)
    if width >= digits and precision <= digits:
        if flag == FLAG_ZERO:
            return Rendered(fill("0", width - digits) + text, width)
        if flag == FLAG_NONE:
            return Rendered(fill(" ", width - digits) + text, width)
        return Rendered(text + fill(" ", width - digits), width)
    if width <= precision and precision >= digits:
        return Rendered(fill("0", precision - digits) + text, precision)
    zeros = fill("0", precision - digits)
    spaces = fill(" ", width - precision)
    if flag == FLAG_LEFT:
        return Rendered(zeros + text + spaces, width)
    return Rendered(spaces + zeros + text, width)


def render_hex(spec: FormatSpec, value: int) -> Rendered:
    """Render ``%x`` (lower case) or ``%X`` for a 32-bit unsigned integer."""
    num = _to_uint32(value)
    text = hex_digits(num, uppercase=spec.conversion != "x")
    flag = _numeric_flag(spec)
    width = spec.width
    precision = _precision(spec)
    size = len(text)
    if precision == 0 and num == 0:
        return Rendered(fill(" ", width), max(width, 0))
    if width <= size and precision <= size:
        return Rendered(text, size)
    if width >= size and precision <= size:
        if flag == FLAG_ZERO:
            return Rendered(fill("0", width - size) + text, width)
        if flag == FLAG_NONE:
            return Rendered(fill(" ", width - size) + text, width)
        return Rendered(text + fill(" ", width - size), width)
    if width <= precision and precision >= size:
        return Rendered(fill("0", precision - size) + text, precision)
    zeros = fill("0", precision - size)
    if flag == FLAG_ZERO:
        return Rendered(fill("0", width - precision) + zeros + text, width)
    if flag == FLAG_NONE:
        return Rendered(fill(" ", width - precision) + zeros + text, width)
    return Rendered(zeros + text + fill(" ", width - precision), width)


def _pad_pointer(text: str, flag: str, width: int) -> Rendered:
    padding = fill(" ", width - len(text))
    if flag == FLAG_LEFT:
        return Rendered(text + padding, width)
    return Rendered(padding + text, width)


def render_pointer(spec: FormatSpec, value: Optional[int]) -> Rendered:
    """Render ``%p``: an address in lower-case hex after ``0x``."""
    num = 0 if value is None else operator.index(value) & 0xFFFFFFFFFFFFFFFF
    width = spec.width
    if num == 0:
        text = _POINTER_PREFIX if spec.precision == 0 else _POINTER_PREFIX + "0"
        if width <= len(text):
            return Rendered(text, len(text))
        return _pad_pointer(text, spec.flag, width)
    text = _POINTER_PREFIX + hex_digits(num)
    if width <= len(text):
        return Rendered(text, len(text))
    return _pad_pointer(text, spec.flag, width)


def render_string(spec: FormatSpec, value: Optional[str]) -> Rendered:
    """Render ``%s``; a None string is shown as ``(null)``."""
    text = _NULL_STRING if value is None else value
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    width = spec.width
    precision = _precision(spec)
    size = len(text)
    flag = spec.flag
    whole = precision >= size or precision == -1
    if whole and width <= size:
        return Rendered(text, size)
    if whole and width >= size:
        if flag == FLAG_NONE:
            return Rendered(fill(" ", width - size) + text, width)
        if flag == FLAG_ZERO:
            return Rendered(fill("0", width - size) + text, width)
        return Rendered(text + fill(" ", width - size), width)
    if precision <= size and precision != -1 and width > precision:
        cut = text[:precision]
        if flag == FLAG_NONE:
            return Rendered(fill(" ", width - precision) + cut, width)
        if flag == FLAG_LEFT:
            return Rendered(cut + fill(" ", width - precision), width)
        return Rendered("", width)
    if precision < size and width <= precision:
        return Rendered(text[:precision], precision)
    return Rendered("", width if precision == 0 else 0)


def render_percent(spec: FormatSpec) -> Rendered:
    """Render ``%%``: a percent sign padded to the width."""
    width = spec.width
    length = width if width >= 1 else 1
    if width >= 1 and spec.flag == FLAG_LEFT:
        return Rendered("%" + fill(" ", width - 1), length)
    if width > 1 and spec.flag == FLAG_ZERO:
        return Rendered(fill("0", width - 1) + "%", length)
    if width > 1 and spec.flag == FLAG_NONE:
        return Rendered(fill(" ", width - 1) + "%", length)
    return Rendered("%", length)