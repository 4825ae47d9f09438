"""Exception classes for pincel.

Highlighting itself never raises: scanning and composition accept any
string. Errors only come from building styles and highlighters out of
bad configuration, and they are meant to be fatal.
"""

from __future__ import annotations


class PincelError(Exception):
    """Base exception for all pincel errors.

    Subclass this for specific error categories.
    """

    pass


class StyleError(PincelError, ValueError):
    """Error while building a Style from configuration input.

    Raised for unknown color names or style attributes.
    """

    def __init__(self, message: str, value: object | None = None) -> None:
        """Initialize style error.

        Args:
            message: Description of the problem
            value: The offending input (optional)
        """
        self.value = value
        if value is not None:
            message = f"{message}: {value!r}"
        super().__init__(message)


class HighlighterError(PincelError):
    """Error when a highlighter cannot be constructed.

    Raised for invalid patterns, empty keyword lists or
    malformed quote tokens.
    """

    def __init__(self, highlighter_name: str, message: str) -> None:
        """Initialize highlighter error.

        Args:
            highlighter_name: Name of the highlighter (e.g., "quote", "regex")
            message: Description of the misconfiguration
        """
        self.highlighter_name = highlighter_name
        super().__init__(f"Highlighter '{highlighter_name}': {message}")
