"""String searching, slicing, trimming and splitting helpers.

Positions are returned as indices into the string; a failed search
returns ``None``. Searching for ``"\\0"`` finds the end of the string, the
place of the terminator in a C string.
"""

from __future__ import annotations

from typing import Callable, List, Optional

__all__ = [
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strjoin",
    "substr",
    "strtrim",
    "split",
    "strmapi",
]


def _single(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def strchr(s: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``s``; ``len(s)`` for ``"\\0"``; else None."""
    _single(ch)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``s``; ``len(s)`` for ``"\\0"``; else None."""
    _single(ch)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly within the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces runs of ``sep`` leave."""
    _single(sep)
    return [part for part in s.split(sep) if part]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character and join the results."""
    return "".join(func(i, ch) for i, ch in enumerate(s))