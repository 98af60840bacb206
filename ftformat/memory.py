"""Byte-buffer helpers in the style of the C memory and bounded-string routines.

Destinations are writable buffers (``bytearray`` or a writable
``memoryview``); sources may be any bytes-like object. Counts that run past
the end of a buffer raise ``ValueError`` instead of growing or overrunning it.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
BytesLike = Union[bytes, bytearray, memoryview]

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memcpy",
    "memccpy",
    "memmove",
    "memchr",
    "memcmp",
    "strlcpy",
    "strlcat",
]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def _cstring_length(data: BytesLike) -> int:
    """Length of the NUL-terminated string at the start of ``data``."""
    raw = bytes(data)
    end = raw.find(0)
    return len(raw) if end == -1 else end


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (truncated to a byte)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: Buffer, src: BytesLike, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: Buffer, src: BytesLike, stop: int, n: int) -> Optional[int]:
    """Copy bytes until ``stop`` has been copied or ``n`` bytes are done.

    Returns the index in ``dest`` just past the copied ``stop`` byte, or
    ``None`` if it was not found within ``n`` bytes.
    """
    _check_count(n, dest, src)
    stop &= 0xFF
    for i, byte in enumerate(bytes(src[:n])):
        dest[i] = byte
        if byte == stop:
            return i + 1
    return None


def memmove(dest: Buffer, src: BytesLike, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; safe when the two overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_count(n, data)
    if not 0 <= c <= 0xFF:
        return None
    index = bytes(data[:n]).find(c)
    return None if index == -1 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair or 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def strlcpy(dest: Buffer, src: BytesLike, size: int) -> int:
    """Copy the C string in ``src`` into ``dest`` within ``size`` bytes.

    At most ``size - 1`` bytes are copied and a terminating NUL is written
    when ``size`` is greater than one. Returns the length of ``src``.
    """
    _check_count(size, dest)
    src_len = _cstring_length(src)
    count = min(src_len, max(size - 1, 0))
    dest[:count] = bytes(src[:count])
    if size > 1:
        dest[count] = 0
    return src_len


def strlcat(dest: Buffer, src: BytesLike, size: int) -> int:
    """Append the C string in ``src`` to the one in ``dest`` within ``size`` bytes.

    Returns ``len(src) + size`` when ``dest`` already fills ``size`` bytes,
    otherwise ``len(dest) + len(src)``: the length the result would have had
    without truncation.
    """
    _check_count(size, dest)
    dest_len = _cstring_length(dest)
    src_len = _cstring_length(src)
    if size == 0 or dest_len >= size:
        return src_len + size
    count = min(src_len, size - dest_len - 1)
    dest[dest_len:dest_len + count] = bytes(src[:count])
    dest[dest_len + count] = 0
    return src_len + dest_len