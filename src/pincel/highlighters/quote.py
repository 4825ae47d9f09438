"""Quoted-string highlighter.

Paints everything between pairs of the quote character, quotes
included. When the text holds an odd number of quote characters the
pairing is ambiguous and nothing is painted.
"""

from __future__ import annotations

import re

from pincel.config import QuoteConfig
from pincel.errors import HighlighterError
from pincel.highlighters import register_highlighter


@register_highlighter("quote")
class QuoteHighlighter:
    __slots__ = ("_token", "_pattern", "_color")

    name = "quote"

    def __init__(self, config: QuoteConfig | None = None) -> None:
        config = config or QuoteConfig()
        if len(config.quotes_token) != 1:
            raise HighlighterError(
                self.name,
                f"quotes_token must be a single character, got {config.quotes_token!r}",
            )
        self._token = config.quotes_token
        quote = re.escape(self._token)
        self._pattern = re.compile(f"{quote}[^{quote}]*{quote}")
        self._color = config.color.painter()

    def apply(self, text: str) -> str:
        count = text.count(self._token)
        if count == 0 or count % 2:
            return text
        return self._pattern.sub(lambda m: self._color(m.group()), text)
