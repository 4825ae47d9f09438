"""Key-value highlighter.

Paints the key and the ``=`` of ``key=value`` pairs. The value is left
plain so later highlighters in the pipeline can still claim it (a
number, a quoted string, a path, ...).
"""

from __future__ import annotations

import re

from pincel.config import KeyValueConfig
from pincel.highlighters import register_highlighter

KEY_VALUE_REGEX = re.compile(r"\b(?P<key>\w+)(?P<separator>=)")


@register_highlighter("key_value")
class KeyValueHighlighter:
    __slots__ = ("_key", "_separator")

    name = "key_value"

    def __init__(self, config: KeyValueConfig | None = None) -> None:
        config = config or KeyValueConfig()
        self._key = config.key.painter()
        self._separator = config.separator.painter()

    def _paint(self, match: re.Match[str]) -> str:
        return self._key(match["key"]) + self._separator(match["separator"])

    def apply(self, text: str) -> str:
        return KEY_VALUE_REGEX.sub(self._paint, text)
