"""
pincel: terminal highlighting for log lines and other plain text

Recognizes numbers, UUIDs, IP addresses, URLs, timestamps, paths,
key-value pairs, quoted strings and process tags, and wraps each one in
ANSI style escapes. Highlighters are composed in a pipeline that never
touches text an earlier highlighter (or an earlier program) already
styled.

Quick Start:
    >>> from pincel import highlight
    >>> highlight("took 42 ms")
    'took \\x1b[36m42\\x1b[0m ms'

    >>> # Build your own precedence order
    >>> from pincel import PipelineBuilder
    >>> pipeline = (
    ...     PipelineBuilder()
    ...     .with_uuid_highlighter()
    ...     .with_number_highlighter()
    ...     .build()
    ... )
    >>> styled = pipeline("request 123e4567-e89b-12d3-a456-426614174000 took 42 ms")

From Configuration:
    >>> from pincel import PipelineBuilder, PipelineConfig
    >>> config = PipelineConfig.from_dict({"highlighters": ["url", "number"]})
    >>> pipeline = PipelineBuilder.from_config(config).build()

Installation:
    pip install pincel
"""

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
from pincel.errors import HighlighterError, PincelError, StyleError
from pincel.highlighters import BUILTIN_HIGHLIGHTERS, BUILTIN_ORDER, get_highlighter
from pincel.pipeline import (
    Pipeline,
    PipelineBuilder,
    apply_only_to_unhighlighted,
    apply_pipeline,
    create_default_pipeline,
    create_full_pipeline,
    create_pipeline_with_defaults,
)
from pincel.protocols import FunctionHighlighter, Highlighter
from pincel.scanner import (
    ESCAPE_PREFIX,
    RESET_MARKER,
    Segment,
    SegmentKind,
    iter_segments,
    split_segments,
)
from pincel.style import Color, Style

__version__ = "0.1.0"


def highlight(text: str, *, pipeline: Pipeline | None = None) -> str:
    """Highlight text with a pipeline.

    Args:
        text: Text to style (may already contain escape markup)
        pipeline: Pipeline to use (the default pipeline if None)

    Returns:
        Styled text

    Example:
        >>> highlight("No match here!")
        'No match here!'
    """
    if pipeline is None:
        pipeline = create_default_pipeline()
    return pipeline.apply(text)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "highlight",
    "Pipeline",
    "PipelineBuilder",
    "apply_only_to_unhighlighted",
    "apply_pipeline",
    "create_default_pipeline",
    "create_full_pipeline",
    "create_pipeline_with_defaults",
    # Scanner
    "ESCAPE_PREFIX",
    "RESET_MARKER",
    "Segment",
    "SegmentKind",
    "iter_segments",
    "split_segments",
    # Highlighters
    "BUILTIN_HIGHLIGHTERS",
    "BUILTIN_ORDER",
    "FunctionHighlighter",
    "Highlighter",
    "get_highlighter",
    # Styles
    "Color",
    "Style",
    # Configuration
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
    # Errors
    "HighlighterError",
    "PincelError",
    "StyleError",
]
