"""IP address highlighters.

IPv4 addresses are dotted quads of 1-3 digit octets. IPv6 addresses
are accepted in full eight-group form and in every ``::``-compressed
form. An IPv6 candidate must not touch a word character or another
colon on either side, which keeps ``std::io`` and ``10:30:00`` out.

Octet values are not range-checked: ``999.1.1.1`` is still painted.
"""

from __future__ import annotations

import re

from pincel.config import IpV4Config, IpV6Config
from pincel.highlighters import register_highlighter
from pincel.highlighters.base import is_decimal_digit, is_hex_letter, paint_runs
from pincel.style import Painter

IPV4_REGEX = re.compile(r"\b(?:[0-9]{1,3}\.){3}[0-9]{1,3}\b")

_H = r"[0-9a-fA-F]{1,4}"

IPV6_REGEX = re.compile(
    rf"""
    (?<![\w:])
    (?:
        (?:{_H}:){{7}}{_H}
      | (?:{_H}:){{1,6}}:{_H}
      | (?:{_H}:){{1,5}}(?::{_H}){{1,2}}
      | (?:{_H}:){{1,4}}(?::{_H}){{1,3}}
      | (?:{_H}:){{1,3}}(?::{_H}){{1,4}}
      | (?:{_H}:){{1,2}}(?::{_H}){{1,5}}
      | {_H}:(?::{_H}){{1,6}}
      | :(?::{_H}){{1,7}}
      | (?:{_H}:){{1,7}}:
      | ::
    )
    (?![\w:])
    """,
    re.VERBOSE,
)


@register_highlighter("ipv4")
class IpV4Highlighter:
    """Paints octets and dots of IPv4 addresses."""

    __slots__ = ("_number", "_separator")

    name = "ipv4"

    def __init__(self, config: IpV4Config | None = None) -> None:
        config = config or IpV4Config()
        self._number = config.number.painter()
        self._separator = config.separator.painter()

    def _classify(self, char: str) -> Painter | None:
        return self._separator if char == "." else self._number

    def apply(self, text: str) -> str:
        return IPV4_REGEX.sub(lambda m: paint_runs(m.group(), self._classify), text)


@register_highlighter("ipv6")
class IpV6Highlighter:
    """Paints digit runs, hex-letter runs and colons of IPv6 addresses."""

    __slots__ = ("_number", "_letter", "_separator")

    name = "ipv6"

    def __init__(self, config: IpV6Config | None = None) -> None:
        config = config or IpV6Config()
        self._number = config.number.painter()
        self._letter = config.letter.painter()
        self._separator = config.separator.painter()

    def _classify(self, char: str) -> Painter | None:
        if is_decimal_digit(char):
            return self._number
        if is_hex_letter(char):
            return self._letter
        return self._separator

    def apply(self, text: str) -> str:
        return IPV6_REGEX.sub(lambda m: paint_runs(m.group(), self._classify), text)
