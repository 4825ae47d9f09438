"""Built-in token highlighters for pincel.

Each highlighter recognizes one token shape and paints it:
- number: integers and decimals
- uuid: 8-4-4-4-12 hex groups, painted per character
- ipv4 / ipv6: IP addresses
- key_value: ``key=`` prefixes
- time: ISO dates, times and timestamps with zones
- url: http(s) URLs with host, path and query parameters
- unix_path: absolute and home/relative paths
- unix_process: ``name[pid]`` tags
- quote: text between pairs of a quote character
- keyword: user-supplied words

Usage:
    >>> from pincel.highlighters import get_highlighter
    >>> uuid = get_highlighter("uuid")
    >>> uuid.apply("no uuid here")
    'no uuid here'

Highlighter Pattern:
    Every built-in compiles its pattern once, locates non-overlapping
    matches, transforms only inside matches and passes everything else
    through byte-for-byte. Styles are turned into painters at
    construction so apply() only concatenates strings.

Thread Safety:
    All highlighters are immutable after construction. One instance can
    serve any number of concurrent apply() calls.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pincel.protocols import Highlighter

__all__ = [
    "BUILTIN_HIGHLIGHTERS",
    "BUILTIN_ORDER",
    "get_highlighter",
    "register_highlighter",
]

# Registry of built-in highlighters
BUILTIN_HIGHLIGHTERS: dict[str, type[Any]] = {}

# Precedence used when every built-in is enabled: composite shapes claim
# their digits before the bare number highlighter sees them.
BUILTIN_ORDER: tuple[str, ...] = (
    "url",
    "time",
    "ipv6",
    "ipv4",
    "uuid",
    "unix_process",
    "unix_path",
    "key_value",
    "quote",
    "number",
)


def register_highlighter(name: str) -> Callable[[type[Any]], type[Any]]:
    """Decorator to register a built-in highlighter.

    Args:
        name: Highlighter name for lookup

    Returns:
        Decorator function that registers and returns the class

    Usage:
        @register_highlighter("number")
        class NumberHighlighter:
            ...
    """

    def decorator(cls: type[Any]) -> type[Any]:
        BUILTIN_HIGHLIGHTERS[name] = cls
        return cls

    return decorator


def get_highlighter(name: str, config: Any = None) -> Highlighter:
    """Get a highlighter instance by name.

    Args:
        name: Highlighter name (e.g., "number", "uuid")
        config: Matching config object, or None for the default styles

    Returns:
        Highlighter instance

    Raises:
        KeyError: If the name is not recognized
        HighlighterError: If the highlighter rejects its config
    """
    if name not in BUILTIN_HIGHLIGHTERS:
        available = ", ".join(sorted(BUILTIN_HIGHLIGHTERS.keys()))
        raise KeyError(f"Unknown highlighter: {name!r}. Available: {available}")
    highlighter: Highlighter = BUILTIN_HIGHLIGHTERS[name](config)
    return highlighter


# Import built-in highlighters to register them
# These imports trigger the @register_highlighter decorators
from pincel.highlighters.ip import IpV4Highlighter, IpV6Highlighter  # noqa: E402
from pincel.highlighters.key_value import KeyValueHighlighter  # noqa: E402
from pincel.highlighters.keywords import KeywordHighlighter  # noqa: E402
from pincel.highlighters.number import NumberHighlighter  # noqa: E402
from pincel.highlighters.quote import QuoteHighlighter  # noqa: E402
from pincel.highlighters.pattern import RegexHighlighter  # noqa: E402
from pincel.highlighters.timestamp import TimeHighlighter  # noqa: E402
from pincel.highlighters.unix import UnixPathHighlighter, UnixProcessHighlighter  # noqa: E402
from pincel.highlighters.url import UrlHighlighter  # noqa: E402
from pincel.highlighters.uuid import UuidHighlighter  # noqa: E402

__all__ += [
    "IpV4Highlighter",
    "IpV6Highlighter",
    "KeyValueHighlighter",
    "KeywordHighlighter",
    "NumberHighlighter",
    "QuoteHighlighter",
    "RegexHighlighter",
    "TimeHighlighter",
    "UnixPathHighlighter",
    "UnixProcessHighlighter",
    "UrlHighlighter",
    "UuidHighlighter",
]
