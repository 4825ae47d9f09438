"""Pipeline composition for pincel.

A pipeline is an ordered tuple of highlighters. Each highlighter runs
over the whole accumulated text, but only sees the plain segments the
scanner finds; styled segments are copied through verbatim. So a later
highlighter can never re-wrap or split a span an earlier one styled,
and the first registered highlighter wins whenever two token shapes
overlap.

Example:
    >>> builder = PipelineBuilder()
    >>> builder.with_uuid_highlighter().with_number_highlighter()
    >>> pipeline = builder.build()
    >>> colored = pipeline.apply("job 42 ran as 123e4567-e89b-12d3-a456-426614174000")

Thread Safety:
    Pipeline is immutable after creation. Safe to share and to apply
    concurrently. Use PipelineBuilder for mutable construction.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import reduce
from typing import TYPE_CHECKING, Any

from pincel.highlighters import BUILTIN_ORDER, get_highlighter
from pincel.highlighters.pattern import RegexHighlighter
from pincel.protocols import FunctionHighlighter, Highlighter
from pincel.scanner import iter_segments
from pincel.utils.logger import get_logger

if TYPE_CHECKING:
    from pincel.config import (
        IpV4Config,
        IpV6Config,
        KeyValueConfig,
        KeywordConfig,
        NumberConfig,
        PipelineConfig,
        QuoteConfig,
        TimeConfig,
        UnixPathConfig,
        UnixProcessConfig,
        UrlConfig,
        UuidConfig,
    )
    from pincel.style import Style

logger = get_logger(__name__)


def apply_only_to_unhighlighted(text: str, highlighter: Highlighter) -> str:
    """Apply one highlighter to the plain parts of text.

    Args:
        text: Text that may already contain styled spans
        highlighter: Highlighter to run on each plain segment

    Returns:
        New text; styled segments are unchanged
    """
    parts: list[str] = []
    for segment in iter_segments(text):
        if segment.is_plain:
            parts.append(highlighter.apply(segment.text))
        else:
            parts.append(segment.text)
    return "".join(parts)


def apply_pipeline(text: str, highlighters: Iterable[Highlighter]) -> str:
    """Apply highlighters in order, each to what the previous ones left plain.

    Args:
        text: Input text
        highlighters: Highlighters in precedence order

    Returns:
        Styled text
    """
    return reduce(apply_only_to_unhighlighted, highlighters, text)


class Pipeline:
    """Immutable ordered sequence of highlighters.

    Applying a pipeline does not consume it; the same instance can
    style any number of strings.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_highlighters",)

    def __init__(self, highlighters: tuple[Highlighter, ...] = ()) -> None:
        """Initialize pipeline with a frozen highlighter tuple.

        Use PipelineBuilder to create instances.
        """
        self._highlighters = highlighters

    def apply(self, text: str) -> str:
        """Style text with every highlighter in order.

        Args:
            text: Input text (may already contain escape markup)

        Returns:
            Styled text. Never raises for any string input.
        """
        return apply_pipeline(text, self._highlighters)

    def __call__(self, text: str) -> str:
        return self.apply(text)

    @property
    def highlighters(self) -> tuple[Highlighter, ...]:
        """Get the highlighters in precedence order."""
        return self._highlighters

    def __iter__(self) -> Iterator[Highlighter]:
        return iter(self._highlighters)

    def __len__(self) -> int:
        """Number of highlighters."""
        return len(self._highlighters)

    def __repr__(self) -> str:
        names = ", ".join(getattr(h, "name", type(h).__name__) for h in self._highlighters)
        return f"Pipeline([{names}])"


class PipelineBuilder:
    """Mutable builder for Pipeline.

    Highlighters are applied in the order they are added. Every method
    returns the builder for chaining.

    Example:
        >>> pipeline = (
        ...     PipelineBuilder()
        ...     .with_url_highlighter()
        ...     .with_number_highlighter()
        ...     .build()
        ... )
    """

    __slots__ = ("_highlighters",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._highlighters: list[Highlighter] = []

    def add(self, highlighter: Highlighter | Callable[[str], str]) -> PipelineBuilder:
        """Append a highlighter.

        Args:
            highlighter: Object implementing the Highlighter protocol, or a
                plain ``str -> str`` function

        Returns:
            Self for chaining

        Raises:
            TypeError: If highlighter is neither
        """
        if isinstance(highlighter, Highlighter):
            self._highlighters.append(highlighter)
        elif callable(highlighter):
            self._highlighters.append(FunctionHighlighter(highlighter))
        else:
            msg = f"{type(highlighter).__name__} has no apply() method and is not callable"
            raise TypeError(msg)
        return self

    def add_all(self, highlighters: Iterable[Highlighter | Callable[[str], str]]) -> PipelineBuilder:
        """Append several highlighters in order."""
        for highlighter in highlighters:
            self.add(highlighter)
        return self

    def with_highlighter(self, name: str, config: Any = None) -> PipelineBuilder:
        """Append a built-in highlighter by name.

        Raises:
            KeyError: If the name is not a built-in highlighter
        """
        return self.add(get_highlighter(name, config))

    def with_number_highlighter(self, config: NumberConfig | None = None) -> PipelineBuilder:
        return self.with_highlighter("number", config)

    def with_uuid_highlighter(self, config: UuidConfig | None = None) -> PipelineBuilder:
        return self.with_highlighter("uuid", config)

    def with_ipv4_highlighter(self, config: IpV4Config | None = None) -> PipelineBuilder:
        return self.with_highlighter("ipv4", config)

    def with_ipv6_highlighter(self, config: IpV6Config | None = None) -> PipelineBuilder:
        return self.with_highlighter("ipv6", config)

    def with_key_value_highlighter(self, config: KeyValueConfig | None = None) -> PipelineBuilder:
        return self.with_highlighter("key_value", config)

    def with_time_highlighter(self, config: TimeConfig | None = None) -> PipelineBuilder:
        return self.with_highlighter("time", config)

    def with_url_highlighter(self, config: UrlConfig | None = None) -> PipelineBuilder:
        return self.with_highlighter("url", config)

    def with_unix_path_highlighter(self, config: UnixPathConfig | None = None) -> PipelineBuilder:
        return self.with_highlighter("unix_path", config)

    def with_unix_process_highlighter(
        self, config: UnixProcessConfig | None = None
    ) -> PipelineBuilder:
        return self.with_highlighter("unix_process", config)

    def with_quote_highlighter(self, config: QuoteConfig | None = None) -> PipelineBuilder:
        return self.with_highlighter("quote", config)

    def with_keyword_highlighter(self, config: KeywordConfig) -> PipelineBuilder:
        return self.with_highlighter("keyword", config)

    def with_regex_highlighter(
        self, pattern: str, style: Style, *, flags: int = 0
    ) -> PipelineBuilder:
        """Append a highlighter painting every match of pattern.

        Raises:
            HighlighterError: If the pattern does not compile
        """
        return self.add(RegexHighlighter(pattern, style, flags=flags))

    def build(self) -> Pipeline:
        """Build immutable pipeline from the added highlighters.

        The builder keeps its own list; adding more highlighters later
        does not affect pipelines already built.

        Returns:
            Immutable Pipeline
        """
        pipeline = Pipeline(tuple(self._highlighters))
        logger.debug("Built %r", pipeline)
        return pipeline

    @classmethod
    def from_config(cls, config: PipelineConfig) -> PipelineBuilder:
        """Create a builder following a PipelineConfig.

        Highlighters are added in ``config.highlighters`` order with their
        configured styles. Keyword groups are inserted where "keyword"
        appears, or ahead of everything else when it does not.

        Raises:
            KeyError: If a name is not a built-in highlighter
            HighlighterError: If a highlighter rejects its config
        """
        builder = cls()
        names = list(config.highlighters)
        if config.keywords and "keyword" not in names:
            names.insert(0, "keyword")

        for name in names:
            if name == "keyword":
                for keyword_config in config.keywords:
                    builder.with_keyword_highlighter(keyword_config)
            else:
                builder.with_highlighter(name, config.config_for(name))

        logger.debug("Assembled pipeline from config: %s", ", ".join(names))
        return builder

    def __len__(self) -> int:
        """Number of added highlighters."""
        return len(self._highlighters)


def _build_default_pipeline() -> Pipeline:
    return PipelineBuilder().with_number_highlighter().with_uuid_highlighter().build()


# Cached singleton, thread-safe since Pipeline is immutable
_DEFAULT_PIPELINE: Pipeline | None = None


def create_default_pipeline() -> Pipeline:
    """Get the default pipeline (cached singleton).

    Returns:
        Pipeline with the number highlighter followed by the UUID
        highlighter. The order is a precedence policy: numbers made only
        of digits claim their span first.

    Thread Safety:
        Returns a cached immutable pipeline. Safe for concurrent access.
    """
    global _DEFAULT_PIPELINE
    if _DEFAULT_PIPELINE is None:
        _DEFAULT_PIPELINE = _build_default_pipeline()
    return _DEFAULT_PIPELINE


def create_pipeline_with_defaults() -> PipelineBuilder:
    """Create a builder pre-populated with the default highlighters.

    Use this to extend the default set:

        >>> builder = create_pipeline_with_defaults()
        >>> builder.with_url_highlighter()
        >>> pipeline = builder.build()

    Returns:
        PipelineBuilder with defaults already added
    """
    return PipelineBuilder().with_number_highlighter().with_uuid_highlighter()


def create_full_pipeline() -> Pipeline:
    """Build a pipeline with every built-in highlighter in BUILTIN_ORDER."""
    builder = PipelineBuilder()
    for name in BUILTIN_ORDER:
        builder.with_highlighter(name)
    return builder.build()


__all__ = [
    "Pipeline",
    "PipelineBuilder",
    "apply_only_to_unhighlighted",
    "apply_pipeline",
    "create_default_pipeline",
    "create_full_pipeline",
    "create_pipeline_with_defaults",
]
