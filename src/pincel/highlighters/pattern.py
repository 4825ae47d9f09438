"""Highlighter for a user-supplied regular expression.

The whole of every match is painted with one style. The pattern is
compiled when the highlighter is built, so a bad pattern fails there
and never during apply().

Example:
    >>> from pincel.style import Color, Style
    >>> hl = RegexHighlighter(r"\\bWARN(?:ING)?\\b", Style(fg=Color.YELLOW))
    >>> hl.apply("WARN: disk")
    '\\x1b[33mWARN\\x1b[0m: disk'
"""

from __future__ import annotations

import re

from pincel.highlighters.base import compile_pattern
from pincel.style import Style


class RegexHighlighter:
    __slots__ = ("_pattern", "_style", "name")

    def __init__(
        self,
        pattern: str | re.Pattern[str],
        style: Style,
        *,
        flags: int = 0,
        name: str = "regex",
    ) -> None:
        """Build the highlighter.

        Args:
            pattern: Regular expression source or compiled pattern
            style: Style for every match
            flags: re flags used when compiling a source pattern
            name: Name reported in errors and reprs

        Raises:
            HighlighterError: If the pattern does not compile
        """
        self.name = name
        self._pattern = compile_pattern(name, pattern, flags)
        self._style = style.painter()

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def apply(self, text: str) -> str:
        return self._pattern.sub(lambda m: self._style(m.group()), text)

    def __repr__(self) -> str:
        return f"RegexHighlighter({self._pattern.pattern!r})"
