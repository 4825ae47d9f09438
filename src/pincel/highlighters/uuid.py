"""UUID highlighter.

Recognizes the hyphenated 8-4-4-4-12 hex shape and paints every
character on its own, picking the style by character class: decimal
digits, hex letters (a-f, A-F) and hyphens each get their own style.

Example:
    >>> UuidHighlighter().apply("id=f47ac10b-58cc-4372-a567-0e02b2c3d479")  # doctest: +SKIP
"""

from __future__ import annotations

import re

from pincel.config import UuidConfig
from pincel.highlighters import register_highlighter
from pincel.highlighters.base import is_decimal_digit, is_hex_letter, paint_chars
from pincel.style import Painter

UUID_REGEX = re.compile(
    r"""
    \b[0-9a-fA-F]{8}\b    # first group
    -
    \b[0-9a-fA-F]{4}\b    # second group
    -
    \b[0-9a-fA-F]{4}\b    # third group
    -
    \b[0-9a-fA-F]{4}\b    # fourth group
    -
    \b[0-9a-fA-F]{12}\b   # last group
    """,
    re.VERBOSE,
)


@register_highlighter("uuid")
class UuidHighlighter:
    """Paints UUIDs character by character."""

    __slots__ = ("_number", "_letter", "_dash")

    name = "uuid"

    def __init__(self, config: UuidConfig | None = None) -> None:
        config = config or UuidConfig()
        self._number = config.number.painter()
        self._letter = config.letter.painter()
        self._dash = config.dash.painter()

    def _classify(self, char: str) -> Painter | None:
        if is_decimal_digit(char):
            return self._number
        if is_hex_letter(char):
            return self._letter
        if char == "-":
            return self._dash
        return None

    def apply(self, text: str) -> str:
        return UUID_REGEX.sub(lambda m: paint_chars(m.group(), self._classify), text)
