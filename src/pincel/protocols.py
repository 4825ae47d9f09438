"""Protocols for pincel.

Defines the contract every highlighter honors. The pipeline only ever
talks to highlighters through this protocol, so any object with a
matching ``apply`` method can take part.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Highlighter(Protocol):
    """Protocol for token highlighters.

    A highlighter receives text that contains no escape markup and
    returns the same text with escape/reset pairs inserted around the
    tokens it recognizes.

    Thread Safety:
        Implementations must be immutable after construction. apply()
        may be called concurrently from multiple threads on the same
        instance.
    """

    def apply(self, text: str) -> str:
        """Style the tokens this highlighter recognizes.

        Args:
            text: Plain text (no escape sequences)

        Returns:
            The text with style markup added

        Contract:
            - MUST NOT raise, for any input including ""
            - MUST only insert escape/reset pairs; every other
              character is preserved in order
            - MUST NOT keep a reference to text after returning
        """
        ...


# Support for simple callable-based highlighters
SimpleHighlighter = Callable[[str], str]


class FunctionHighlighter:
    """Adapts a plain ``str -> str`` function to the Highlighter protocol."""

    __slots__ = ("_func", "name")

    def __init__(self, func: SimpleHighlighter, name: str | None = None) -> None:
        self._func = func
        self.name = name or getattr(func, "__name__", "function")

    def apply(self, text: str) -> str:
        return self._func(text)

    def __repr__(self) -> str:
        return f"FunctionHighlighter({self.name!r})"


__all__ = [
    "FunctionHighlighter",
    "Highlighter",
    "SimpleHighlighter",
]
