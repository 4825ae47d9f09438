"""Shared fixtures for pincel tests.

Escape sequences are hard to read in assertions, so tests convert them
to tags first: ``\\x1b[3;34m1\\x1b[0m`` becomes ``[italic+blue]1[reset]``.
"""

import re

import pytest

_SGR = re.compile(r"\x1b\[([0-9;]*)m")

_COLOR_NAMES = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

_CODE_NAMES: dict[str, str] = {
    "0": "reset",
    "1": "bold",
    "2": "faint",
    "3": "italic",
    "4": "underline",
    "39": "default",
    "49": "on_default",
}
for _number, _name in enumerate(_COLOR_NAMES):
    _CODE_NAMES[str(30 + _number)] = _name
    _CODE_NAMES[str(40 + _number)] = f"on_{_name}"
    _CODE_NAMES[str(90 + _number)] = f"bright_{_name}"
    _CODE_NAMES[str(100 + _number)] = f"on_bright_{_name}"


def convert_escape_codes(text: str) -> str:
    """Replace every SGR escape sequence with a readable tag."""

    def tag(match: re.Match[str]) -> str:
        names = [_CODE_NAMES.get(code, code) for code in match.group(1).split(";")]
        return "[" + "+".join(names) + "]"

    return _SGR.sub(tag, text)


def strip_escape_codes(text: str) -> str:
    """Remove every SGR escape sequence."""
    return _SGR.sub("", text)


@pytest.fixture
def convert():
    """Escape-code to tag converter."""
    return convert_escape_codes


@pytest.fixture
def strip():
    """Escape-code remover."""
    return strip_escape_codes
