"""Number highlighter: integers and decimals bounded by word breaks."""

from __future__ import annotations

import re

from pincel.config import NumberConfig
from pincel.highlighters import register_highlighter

NUMBER_REGEX = re.compile(
    r"""
    (?<![0-9a-fA-F]-)   # not the tail of a hyphen-joined hex group
    \b
    (?>
        [0-9]+          # integer part
        (?:\.[0-9]+)?   # optional decimal part
    )
    \b
    (?!-[0-9a-fA-F])    # not the head of a hyphen-joined hex group
    """,
    re.VERBOSE,
)


@register_highlighter("number")
class NumberHighlighter:
    """Paints every standalone number with a single style.

    Digits glued to letters (``v2``, ``123e4567``) are not numbers, and
    neither are digit groups hyphen-joined to other hex groups, so a
    UUID like ``123e4567-e89b-12d3-a456-426614174000`` is left whole for
    the UUID highlighter. Dates and ranges (``2023-06-24``, ``10-20``)
    are left to the time highlighter for the same reason.
    """

    __slots__ = ("_number",)

    name = "number"

    def __init__(self, config: NumberConfig | None = None) -> None:
        config = config or NumberConfig()
        self._number = config.number.painter()

    def apply(self, text: str) -> str:
        return NUMBER_REGEX.sub(lambda m: self._number(m.group()), text)
