"""URL highlighter.

Recognizes ``http`` and ``https`` URLs and paints each part:

    https :// example.com:8080 /a/b ? key = value & k2 = v2 # frag
    scheme    host             path   query keys / values     path

The scheme style depends on whether the URL is encrypted. ``://``,
``?``, ``=``, ``&`` and ``#`` use the symbols style.
"""

from __future__ import annotations

import re

from pincel.config import UrlConfig
from pincel.highlighters import register_highlighter

URL_REGEX = re.compile(
    r"""
    \b(?P<scheme>https?)
    ://
    (?P<host>[\w-]+(?:\.[\w-]+)*(?::[0-9]+)?)
    (?P<path>/[^\s?#]*)?
    (?:\?(?P<query>[^\s#]*))?
    (?:\#(?P<fragment>\S*))?
    """,
    re.VERBOSE,
)


@register_highlighter("url")
class UrlHighlighter:
    __slots__ = (
        "_http",
        "_https",
        "_host",
        "_path",
        "_query_key",
        "_query_value",
        "_symbols",
    )

    name = "url"

    def __init__(self, config: UrlConfig | None = None) -> None:
        config = config or UrlConfig()
        self._http = config.http.painter()
        self._https = config.https.painter()
        self._host = config.host.painter()
        self._path = config.path.painter()
        self._query_key = config.query_params_key.painter()
        self._query_value = config.query_params_value.painter()
        self._symbols = config.symbols.painter()

    def _paint_query(self, query: str) -> str:
        pairs: list[str] = []
        for pair in query.split("&"):
            key, eq, value = pair.partition("=")
            pairs.append(self._query_key(key) + self._symbols(eq) + self._query_value(value))
        return self._symbols("&").join(pairs)

    def _paint(self, match: re.Match[str]) -> str:
        scheme = match["scheme"]
        painter = self._https if scheme == "https" else self._http
        parts = [painter(scheme), self._symbols("://"), self._host(match["host"])]
        if match["path"]:
            parts.append(self._path(match["path"]))
        if match["query"] is not None:
            parts.append(self._symbols("?"))
            parts.append(self._paint_query(match["query"]))
        if match["fragment"] is not None:
            parts.append(self._symbols("#"))
            parts.append(self._path(match["fragment"]))
        return "".join(parts)

    def apply(self, text: str) -> str:
        return URL_REGEX.sub(self._paint, text)
