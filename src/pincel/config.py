"""Highlighter configuration for pincel.

Each built-in highlighter takes one immutable config holding its
styles. Defaults give a readable palette on dark and light terminals.
PipelineConfig gathers all of them plus the highlighter order, so a
whole pipeline can be described by a single mapping (from TOML, YAML,
CLI flags, ...).

Usage:
    >>> from pincel import PipelineBuilder
    >>> from pincel.config import PipelineConfig
    >>> config = PipelineConfig.from_dict({
    ...     "highlighters": ["uuid", "number"],
    ...     "number": {"number": "bold yellow"},
    ... })
    >>> pipeline = PipelineBuilder.from_config(config).build()

Thread Safety:
    All configs are frozen dataclasses and safe to share.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from pincel.style import Color, Style


class _HighlighterConfig:
    """Shared from_dict() for the per-highlighter configs."""

    __slots__ = ()

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> Any:
        """Create a config from a dictionary.

        Only keys naming a field are used; unknown keys are silently
        ignored. Style fields accept a Style, a style string such as
        ``"bold red"`` or a mapping such as ``{"fg": "red"}``.

        Raises:
            StyleError: If a style value cannot be parsed
        """
        values: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            if f.name not in config_dict:
                continue
            value = config_dict[f.name]
            if f.type == "Style":
                value = Style.coerce(value)
            values[f.name] = value
        return cls(**values)


@dataclass(frozen=True, slots=True)
class NumberConfig(_HighlighterConfig):
    number: Style = Style(fg=Color.CYAN)


@dataclass(frozen=True, slots=True)
class UuidConfig(_HighlighterConfig):
    number: Style = Style(fg=Color.BLUE, italic=True)
    letter: Style = Style(fg=Color.MAGENTA, italic=True)
    dash: Style = Style(fg=Color.RED)


@dataclass(frozen=True, slots=True)
class KeyValueConfig(_HighlighterConfig):
    key: Style = Style(faint=True)
    separator: Style = Style(fg=Color.WHITE)


@dataclass(frozen=True, slots=True)
class TimeConfig(_HighlighterConfig):
    time: Style = Style(fg=Color.BLUE)
    zone: Style = Style(fg=Color.RED)
    separator: Style = Style(faint=True)


@dataclass(frozen=True, slots=True)
class IpV4Config(_HighlighterConfig):
    number: Style = Style(fg=Color.BLUE, italic=True)
    separator: Style = Style(fg=Color.RED)


@dataclass(frozen=True, slots=True)
class IpV6Config(_HighlighterConfig):
    number: Style = Style(fg=Color.BLUE, italic=True)
    letter: Style = Style(fg=Color.MAGENTA, italic=True)
    separator: Style = Style(fg=Color.RED)


@dataclass(frozen=True, slots=True)
class UrlConfig(_HighlighterConfig):
    """Styles for the parts of a URL.

    Attributes:
        http: Scheme of plain-text URLs
        https: Scheme of TLS URLs
        host: Host name and port
        path: Path and fragment
        query_params_key: Keys in the query string
        query_params_value: Values in the query string
        symbols: ``://``, ``?``, ``=``, ``&`` and ``#``
    """

    http: Style = Style(fg=Color.RED, faint=True)
    https: Style = Style(fg=Color.GREEN, faint=True)
    host: Style = Style(fg=Color.BLUE, faint=True)
    path: Style = Style(fg=Color.BLUE)
    query_params_key: Style = Style(fg=Color.MAGENTA)
    query_params_value: Style = Style(fg=Color.CYAN)
    symbols: Style = Style(fg=Color.RED)


@dataclass(frozen=True, slots=True)
class UnixPathConfig(_HighlighterConfig):
    segment: Style = Style(fg=Color.GREEN)
    separator: Style = Style(fg=Color.YELLOW)


@dataclass(frozen=True, slots=True)
class UnixProcessConfig(_HighlighterConfig):
    name: Style = Style(fg=Color.GREEN)
    id: Style = Style(fg=Color.YELLOW)
    bracket: Style = Style(fg=Color.RED)


@dataclass(frozen=True, slots=True)
class QuoteConfig(_HighlighterConfig):
    """Quoted-string styling.

    Attributes:
        quotes_token: The single character that opens and closes a quote
        color: Style of the quoted span, quotes included
    """

    quotes_token: str = '"'
    color: Style = Style(fg=Color.YELLOW)


@dataclass(frozen=True, slots=True)
class KeywordConfig(_HighlighterConfig):
    """A group of words sharing one style.

    Attributes:
        words: Words to highlight (matched whole, case-sensitive)
        style: Style applied to each occurrence
    """

    words: tuple[str, ...]
    style: Style = Style(fg=Color.RED, bold=True)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> KeywordConfig:
        words = config_dict.get("words", ())
        if isinstance(words, str):
            words = (words,)
        data = {**config_dict, "words": tuple(words)}
        return super(KeywordConfig, cls).from_dict(data)


# Highlighter names with a dedicated config field on PipelineConfig
_CONFIG_FIELDS: dict[str, type[_HighlighterConfig]] = {
    "number": NumberConfig,
    "uuid": UuidConfig,
    "key_value": KeyValueConfig,
    "time": TimeConfig,
    "ipv4": IpV4Config,
    "ipv6": IpV6Config,
    "url": UrlConfig,
    "unix_path": UnixPathConfig,
    "unix_process": UnixProcessConfig,
    "quote": QuoteConfig,
}


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Immutable description of a whole pipeline.

    Attributes:
        highlighters: Highlighter names in precedence order. "keyword"
            marks where the keyword groups go.
        keywords: Keyword groups, each becoming one highlighter
        number, uuid, ...: Per-highlighter styles
    """

    highlighters: tuple[str, ...] = ("number", "uuid")
    number: NumberConfig = field(default_factory=NumberConfig)
    uuid: UuidConfig = field(default_factory=UuidConfig)
    key_value: KeyValueConfig = field(default_factory=KeyValueConfig)
    time: TimeConfig = field(default_factory=TimeConfig)
    ipv4: IpV4Config = field(default_factory=IpV4Config)
    ipv6: IpV6Config = field(default_factory=IpV6Config)
    url: UrlConfig = field(default_factory=UrlConfig)
    unix_path: UnixPathConfig = field(default_factory=UnixPathConfig)
    unix_process: UnixProcessConfig = field(default_factory=UnixProcessConfig)
    quote: QuoteConfig = field(default_factory=QuoteConfig)
    keywords: tuple[KeywordConfig, ...] = ()

    def config_for(self, name: str) -> _HighlighterConfig | None:
        """Get the config for a built-in highlighter name, if it has one."""
        if name in _CONFIG_FIELDS:
            return getattr(self, name)
        return None

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> PipelineConfig:
        """Create a PipelineConfig from a (nested) dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> config = PipelineConfig.from_dict({
            ...     "highlighters": ["keyword", "number"],
            ...     "keywords": [{"words": ["ERROR"], "style": "bold red"}],
            ... })
            >>> config.keywords[0].words
            ('ERROR',)
        """
        values: dict[str, Any] = {}
        if "highlighters" in config_dict:
            highlighters = config_dict["highlighters"]
            if isinstance(highlighters, str):
                highlighters = (highlighters,)
            values["highlighters"] = tuple(highlighters)
        for name, config_cls in _CONFIG_FIELDS.items():
            if name not in config_dict:
                continue
            value = config_dict[name]
            values[name] = value if isinstance(value, config_cls) else config_cls.from_dict(value)
        if "keywords" in config_dict:
            values["keywords"] = tuple(
                k if isinstance(k, KeywordConfig) else KeywordConfig.from_dict(k)
                for k in config_dict["keywords"]
            )
        return cls(**values)


__all__ = [
    "IpV4Config",
    "IpV6Config",
    "KeyValueConfig",
    "KeywordConfig",
    "NumberConfig",
    "PipelineConfig",
    "QuoteConfig",
    "TimeConfig",
    "UnixPathConfig",
    "UnixProcessConfig",
    "UrlConfig",
    "UuidConfig",
]
