"""Shared building blocks for highlighters.

Helpers to compile patterns with construction-time error reporting and
to paint a matched token by character class.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from itertools import groupby

from pincel.errors import HighlighterError
from pincel.style import Painter

# Maps one character to the painter for its class, or None to leave it as is
CharClassifier = Callable[[str], Painter | None]


def compile_pattern(name: str, pattern: str | re.Pattern[str], flags: int = 0) -> re.Pattern[str]:
    """Compile a highlighter pattern.

    Args:
        name: Highlighter name, for the error message
        pattern: Regular expression source or an already compiled pattern
        flags: re flags (ignored for compiled patterns)

    Returns:
        Compiled pattern

    Raises:
        HighlighterError: If the pattern is invalid
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise HighlighterError(name, f"invalid pattern {pattern!r}: {e}") from e


def paint_chars(token: str, classify: CharClassifier) -> str:
    """Paint every character of token on its own."""
    parts: list[str] = []
    for char in token:
        painter = classify(char)
        parts.append(painter(char) if painter is not None else char)
    return "".join(parts)


def paint_runs(token: str, classify: CharClassifier) -> str:
    """Paint maximal runs of characters that share a painter."""
    parts: list[str] = []
    for painter, chars in groupby(token, key=classify):
        run = "".join(chars)
        parts.append(painter(run) if painter is not None else run)
    return "".join(parts)


def is_decimal_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_hex_letter(char: str) -> bool:
    return "a" <= char <= "f" or "A" <= char <= "F"
