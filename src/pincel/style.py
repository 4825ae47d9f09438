"""Abstract styles and their translation to ANSI escape sequences.

A Style is a small immutable value: optional foreground and background
colors plus four boolean attributes. Highlighters receive styles at
construction time and turn them into painters once, so the hot path
only concatenates strings.

Translation is delegated to rich, rendered with the standard 16-color
system. A painted string has the shape::

    ESC [ <codes> m <text> ESC [ 0 m

where codes are attributes first (1 bold, 2 faint, 3 italic,
4 underline), then the foreground (30-37, 90-97), then the background
(40-47, 100-107). A style without any attribute paints nothing.

Example:
    >>> Style(fg=Color.RED, bold=True).paint("oops")
    '\\x1b[1;31moops\\x1b[0m'
    >>> Style.parse("italic blue on white") == Style(
    ...     fg=Color.BLUE, bg=Color.WHITE, italic=True
    ... )
    True

Thread Safety:
    Style is a frozen dataclass. Painters are pure functions of their
    input. Both are safe to share across threads.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache, partial
from typing import Any

from rich.color import ColorSystem
from rich.style import Style as RichStyle

from pincel.errors import StyleError

Painter = Callable[[str], str]


class Color(Enum):
    """The 16 standard terminal colors plus the terminal default."""

    BLACK = "black"
    DARK_GRAY = "dark_gray"
    RED = "red"
    LIGHT_RED = "light_red"
    GREEN = "green"
    LIGHT_GREEN = "light_green"
    YELLOW = "yellow"
    LIGHT_YELLOW = "light_yellow"
    BLUE = "blue"
    LIGHT_BLUE = "light_blue"
    PURPLE = "purple"
    LIGHT_PURPLE = "light_purple"
    MAGENTA = "magenta"
    LIGHT_MAGENTA = "light_magenta"
    CYAN = "cyan"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"
    LIGHT_GRAY = "light_gray"
    DEFAULT = "default"

    @property
    def rich_name(self) -> str:
        """Name of the equivalent rich standard color."""
        return _RICH_NAMES[self]

    @classmethod
    def parse(cls, name: str) -> Color:
        """Look up a color by name.

        Case-insensitive; ``-`` and spaces are accepted in place of ``_``
        ("light-red", "Light Red", "LIGHT_RED").

        Raises:
            StyleError: If the name is not a known color
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            available = ", ".join(c.value for c in cls)
            raise StyleError(f"Unknown color (available: {available})", name) from None


# Purple and magenta share a code in the 16-color palette.
_RICH_NAMES: dict[Color, str] = {
    Color.BLACK: "black",
    Color.DARK_GRAY: "bright_black",
    Color.RED: "red",
    Color.LIGHT_RED: "bright_red",
    Color.GREEN: "green",
    Color.LIGHT_GREEN: "bright_green",
    Color.YELLOW: "yellow",
    Color.LIGHT_YELLOW: "bright_yellow",
    Color.BLUE: "blue",
    Color.LIGHT_BLUE: "bright_blue",
    Color.PURPLE: "magenta",
    Color.LIGHT_PURPLE: "bright_magenta",
    Color.MAGENTA: "magenta",
    Color.LIGHT_MAGENTA: "bright_magenta",
    Color.CYAN: "cyan",
    Color.LIGHT_CYAN: "bright_cyan",
    Color.WHITE: "white",
    Color.LIGHT_GRAY: "bright_white",
    Color.DEFAULT: "default",
}

_ATTRIBUTE_WORDS: dict[str, str] = {
    "bold": "bold",
    "faint": "faint",
    "dim": "faint",
    "italic": "italic",
    "underline": "underline",
}


@dataclass(frozen=True, slots=True)
class Style:
    """Immutable abstract style.

    Attributes:
        fg: Foreground color, or None to leave it untouched
        bg: Background color, or None to leave it untouched
        bold: Bold / increased intensity
        faint: Faint / decreased intensity
        italic: Italic
        underline: Underline
    """

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    faint: bool = False
    italic: bool = False
    underline: bool = False

    @property
    def is_plain(self) -> bool:
        """True when painting with this style leaves text unchanged."""
        return (
            self.fg is None
            and self.bg is None
            and not (self.bold or self.faint or self.italic or self.underline)
        )

    def to_rich(self) -> RichStyle:
        """Convert to the equivalent rich Style."""
        return RichStyle(
            color=self.fg.rich_name if self.fg is not None else None,
            bgcolor=self.bg.rich_name if self.bg is not None else None,
            bold=self.bold or None,
            dim=self.faint or None,
            italic=self.italic or None,
            underline=self.underline or None,
        )

    def painter(self) -> Painter:
        """Build a function that wraps text in this style's escape pair.

        Empty text is returned unchanged, as is any text when the style
        is plain. Painters are cached per style, so equal styles share one.
        """
        return _build_painter(self)

    def paint(self, text: str) -> str:
        """Wrap text in this style's escape/reset pair."""
        return _build_painter(self)(text)

    @classmethod
    def parse(cls, spec: str) -> Style:
        """Parse a style from words, e.g. ``"bold red on blue"``.

        Attribute words are bold, faint (or dim), italic and underline.
        The first color word sets the foreground; a color after ``on``
        sets the background.

        Raises:
            StyleError: On unknown words or a dangling ``on``
        """
        values: dict[str, Any] = {}
        words = spec.split()
        index = 0
        while index < len(words):
            word = words[index].lower()
            if word in _ATTRIBUTE_WORDS:
                values[_ATTRIBUTE_WORDS[word]] = True
            elif word == "on":
                index += 1
                if index >= len(words):
                    raise StyleError("Expected a background color after 'on'", spec)
                values["bg"] = Color.parse(words[index])
            else:
                values["fg"] = Color.parse(word)
            index += 1
        return cls(**values)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Style:
        """Create a Style from a mapping such as ``{"fg": "red", "bold": True}``.

        Unknown keys are ignored. Colors may be given as Color members
        or names.
        """
        values: dict[str, Any] = {}
        for key in ("fg", "bg"):
            color = data.get(key)
            if color is not None:
                values[key] = color if isinstance(color, Color) else Color.parse(str(color))
        for key in ("bold", "faint", "italic", "underline"):
            if key in data:
                values[key] = bool(data[key])
        return cls(**values)

    @classmethod
    def coerce(cls, value: Style | str | Mapping[str, Any]) -> Style:
        """Accept a Style, a style string or a style mapping.

        Raises:
            StyleError: If value is none of those
        """
        if isinstance(value, Style):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise StyleError("Cannot build a style from", value)


@lru_cache(maxsize=256)
def _build_painter(style: Style) -> Painter:
    return partial(style.to_rich().render, color_system=ColorSystem.STANDARD)


__all__ = [
    "Color",
    "Painter",
    "Style",
]
