"""Escape-aware scanner.

Splits text into segments that are either plain or already styled,
based only on where escape sequences open and where the reset marker
closes them. The scanner knows nothing about specific color codes: any
``ESC [`` opens markup and the first ``ESC [ 0 m`` after it closes it.

Example:
    >>> text = "date \\x1b[31m2023-06-24\\x1b[0m, number 12345."
    >>> [s.kind.value for s in split_segments(text)]
    ['plain', 'styled', 'plain']

Edge Cases:
    - Empty input yields no segments.
    - An escape with no reset after it makes the rest of the string one
      styled segment. Unterminated markup is treated as already styled
      so it is never styled twice.
    - Segments are never empty.

Complexity:
    O(n): each character is visited by at most one ``str.find``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

ESCAPE_PREFIX = "\x1b["
RESET_MARKER = "\x1b[0m"


class SegmentKind(Enum):
    """Whether a segment may still be highlighted."""

    PLAIN = "plain"
    STYLED = "styled"


@dataclass(frozen=True, slots=True)
class Segment:
    """A non-empty slice of the scanned text.

    Attributes:
        kind: PLAIN for raw text, STYLED for text inside escape markup
            (escape and reset included)
        text: The slice itself
    """

    kind: SegmentKind
    text: str

    @property
    def is_plain(self) -> bool:
        return self.kind is SegmentKind.PLAIN


def iter_segments(text: str) -> Iterator[Segment]:
    """Lazily split text into plain and styled segments.

    Args:
        text: Text that may contain ANSI escape sequences

    Yields:
        Segments in order; joining their text reproduces the input
    """
    start = 0
    inside_markup = False

    while True:
        marker = RESET_MARKER if inside_markup else ESCAPE_PREFIX
        found = text.find(marker, start)
        if found == -1:
            break

        if inside_markup:
            end = found + len(RESET_MARKER)
            yield Segment(SegmentKind.STYLED, text[start:end])
            start = end
        else:
            if found != start:
                yield Segment(SegmentKind.PLAIN, text[start:found])
            start = found
        inside_markup = not inside_markup

    if start != len(text):
        kind = SegmentKind.STYLED if inside_markup else SegmentKind.PLAIN
        yield Segment(kind, text[start:])


def split_segments(text: str) -> list[Segment]:
    """Split text into plain and styled segments.

    Args:
        text: Text that may contain ANSI escape sequences

    Returns:
        Ordered list of segments covering the whole input
    """
    return list(iter_segments(text))


__all__ = [
    "ESCAPE_PREFIX",
    "RESET_MARKER",
    "Segment",
    "SegmentKind",
    "iter_segments",
    "split_segments",
]
