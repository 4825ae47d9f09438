"""Keyword highlighter: paints user-chosen words.

Words match whole (not inside longer words) and case-sensitively.
Longer words win over their prefixes ("ERROR" before "ERR").
"""

from __future__ import annotations

import re

from pincel.config import KeywordConfig
from pincel.errors import HighlighterError
from pincel.highlighters import register_highlighter


@register_highlighter("keyword")
class KeywordHighlighter:
    __slots__ = ("_pattern", "_style", "words")

    name = "keyword"

    def __init__(self, config: KeywordConfig | None = None) -> None:
        if config is None:
            raise HighlighterError(self.name, "requires a KeywordConfig with words")
        words = tuple(dict.fromkeys(w for w in config.words if w))
        if not words:
            raise HighlighterError(self.name, "at least one non-empty word is required")
        self.words = words
        alternatives = "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))
        self._pattern = re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)")
        self._style = config.style.painter()

    def apply(self, text: str) -> str:
        return self._pattern.sub(lambda m: self._style(m.group()), text)
