"""Unix path and process highlighters.

Paths must be anchored: absolute (``/var/log``), home-relative
(``~/notes``) or dot-relative (``./build``, ``../src``). Bare
``and/or`` style words are left alone.

Process tags are the ``name[pid]`` prefixes syslog writes, e.g.
``sshd[1234]``.
"""

from __future__ import annotations

import re

from pincel.config import UnixPathConfig, UnixProcessConfig
from pincel.highlighters import register_highlighter
from pincel.highlighters.base import paint_runs
from pincel.style import Painter

UNIX_PATH_REGEX = re.compile(
    r"""
    (?<![\w/.~-])
    (?:~|\.{1,2})?          # optional home or relative anchor
    (?:/[\w.@+-]+)+         # one or more segments
    /?                      # trailing slash of a directory
    """,
    re.VERBOSE,
)

UNIX_PROCESS_REGEX = re.compile(r"\b(?P<name>[A-Za-z_][\w.-]*)\[(?P<id>[0-9]+)\]")


@register_highlighter("unix_path")
class UnixPathHighlighter:
    """Paints path segments and the slashes between them."""

    __slots__ = ("_segment", "_separator")

    name = "unix_path"

    def __init__(self, config: UnixPathConfig | None = None) -> None:
        config = config or UnixPathConfig()
        self._segment = config.segment.painter()
        self._separator = config.separator.painter()

    def _classify(self, char: str) -> Painter | None:
        return self._separator if char == "/" else self._segment

    def apply(self, text: str) -> str:
        return UNIX_PATH_REGEX.sub(lambda m: paint_runs(m.group(), self._classify), text)


@register_highlighter("unix_process")
class UnixProcessHighlighter:
    """Paints process name, brackets and pid."""

    __slots__ = ("_name", "_id", "_bracket")

    name = "unix_process"

    def __init__(self, config: UnixProcessConfig | None = None) -> None:
        config = config or UnixProcessConfig()
        self._name = config.name.painter()
        self._id = config.id.painter()
        self._bracket = config.bracket.painter()

    def _paint(self, match: re.Match[str]) -> str:
        return (
            self._name(match["name"])
            + self._bracket("[")
            + self._id(match["id"])
            + self._bracket("]")
        )

    def apply(self, text: str) -> str:
        return UNIX_PROCESS_REGEX.sub(self._paint, text)
