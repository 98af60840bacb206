"""Formatting of whole format strings.

The supported conversions are ``c s p d i u x X %`` with the ``0`` and
``-`` flags, a width and a precision, either of which may be ``*`` to
take the value from the arguments.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, List, Optional, TextIO

from .conversions import (
    Rendered,
    render_char,
    render_hex,
    render_int,
    render_percent,
    render_pointer,
    render_string,
    render_unsigned,
)
from .spec import SPECIFIERS, FormatSpec, parse_spec

__all__ = ["render", "printf"]

_WITH_VALUE: Dict[str, Callable[[FormatSpec, Any], Rendered]] = {
    "d": render_int,
    "i": render_int,
    "c": render_char,
    "s": render_string,
    "p": render_pointer,
    "u": render_unsigned,
    "x": render_hex,
    "X": render_hex,
}


def _has_conversion_after(fmt: str, index: int) -> bool:
    """True if a conversion character follows the ``%`` at ``index``."""
    return any(ch in SPECIFIERS for ch in fmt[index + 1:])


def _next_value(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for '%{conversion}'") from None


def _convert(spec: FormatSpec, args: Iterator[Any]) -> Rendered:
    conversion = spec.conversion
    if conversion == "%":
        return render_percent(spec)
    handler = _WITH_VALUE.get(conversion) if conversion else None
    if handler is None:
        return Rendered("", 0)
    return handler(spec, _next_value(args, conversion))


def render(fmt: str, *args: Any) -> Rendered:
    """Format ``fmt`` with ``args``; return the text and the reported count.

    A ``%`` with no conversion character anywhere after it stops the
    formatting: the text produced so far is kept and the count is 0.
    Unknown conversions produce nothing and take no argument.
    """
    values = iter(args)
    pieces: List[str] = []
    length = 0
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent == -1:
            pieces.append(fmt[pos:])
            length += len(fmt) - pos
            break
        pieces.append(fmt[pos:percent])
        length += percent - pos
        if not _has_conversion_after(fmt, percent):
            return Rendered("".join(pieces), 0)
        spec, pos = parse_spec(fmt, percent, values)
        piece = _convert(spec, values)
        pieces.append(piece.text)
        length += piece.length
    return Rendered("".join(pieces), length)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the count reported by :func:`render`.
    """
    result = render(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(result.text)
    return result.length