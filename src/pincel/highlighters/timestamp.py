"""Date and time highlighter.

Recognizes ISO-8601 style stamps:

- dates: ``2023-06-24``
- times: ``10:00``, ``10:00:00``, ``10:00:00.123`` (or ``,123``)
- both, joined by ``T`` or a space
- an optional zone: ``Z``, ``+02:00``, ``-0500``

Digits take the time style, punctuation the separator style and the
zone its own style. Whitespace inside a stamp is left unstyled.
"""

from __future__ import annotations

import re

from pincel.config import TimeConfig
from pincel.highlighters import register_highlighter
from pincel.highlighters.base import is_decimal_digit, paint_runs
from pincel.style import Painter

_TIME = r"[0-9]{2}:[0-9]{2}(?::[0-9]{2})?(?:[.,][0-9]{1,9})?"

TIME_REGEX = re.compile(
    rf"""
    (?<![\w:.-])
    (?P<stamp>
        [0-9]{{4}}-[0-9]{{2}}-[0-9]{{2}}(?:[T\x20]{_TIME})?
      | {_TIME}
    )
    (?P<zone>Z|[+-][0-9]{{2}}:?[0-9]{{2}})?
    (?![\w:])
    """,
    re.VERBOSE,
)


@register_highlighter("time")
class TimeHighlighter:
    """Paints dates, times and time zones."""

    __slots__ = ("_time", "_zone", "_separator")

    name = "time"

    def __init__(self, config: TimeConfig | None = None) -> None:
        config = config or TimeConfig()
        self._time = config.time.painter()
        self._zone = config.zone.painter()
        self._separator = config.separator.painter()

    def _classify(self, char: str) -> Painter | None:
        if is_decimal_digit(char):
            return self._time
        if char.isspace():
            return None
        return self._separator

    def _paint(self, match: re.Match[str]) -> str:
        return paint_runs(match["stamp"], self._classify) + self._zone(match["zone"] or "")

    def apply(self, text: str) -> str:
        return TIME_REGEX.sub(self._paint, text)
