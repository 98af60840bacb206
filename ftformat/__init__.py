"""Printf-style formatting with fixed field rules, plus string, number, memory, list and line-reading helpers."""

__version__ = "0.1.0"