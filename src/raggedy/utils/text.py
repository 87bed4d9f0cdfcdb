"""Text helpers for line splitting and prefix extraction."""

from __future__ import annotations

from typing import Iterator


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text`` without their terminators.

    Lines end at ``\\n`` or ``\\r\\n``. Other Unicode line separators are left
    inside the line, and a trailing newline does not produce an empty line.
    """
    *terminated, last = text.split("\n")
    for line in terminated:
        yield line[:-1] if line.endswith("\r") else line
    if last:
        yield last


def truncate_chars(text: str, limit: int) -> str:
    """Return at most ``limit`` characters from the start of ``text``.

    Slicing a ``str`` counts code points, so multibyte characters are never
    split.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return text[:limit]
