"""Colours, text styles and highlight priorities."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, replace

DEFAULT_PRIORITY = 10

_PRIORITY_PREFIX = "priority:"
_PRIORITY_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse a ``#rrggbb`` colour code."""
        if len(text.encode("utf-8")) != 7 or not text.startswith("#"):
            raise ValueError(f"invalid hex colour: {text!r}")
        digits = text[1:]
        if any(ch not in string.hexdigits for ch in digits):
            raise ValueError(f"invalid hex colour: {text!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.BLUE = Color(0, 0, 255)
Color.RED = Color(255, 0, 0)
Color.DARK_RED = Color(128, 0, 0)

ACCENT = Color(50, 35, 70)
ACCENT_BRIGHT = Color(96, 32, 220)
ERROR_DARK = Color(48, 16, 16)
MODELINE_TEXT = Color(210, 210, 0)


@dataclass(frozen=True)
class Style:
    """How a run of text is drawn."""

    foreground_color: Color | None = None
    background_color: Color | None = None
    invert: bool = False
    underlined: bool = False

    def with_foreground_color(self, color: Color) -> Style:
        return replace(self, foreground_color=color)


def priority_from_str(src: str) -> int:
    """Parse a ``priority:N`` value, where N fits in a byte."""
    if not src.startswith(_PRIORITY_PREFIX):
        raise ValueError(f"not a priority: {src!r}")
    digits = src
    while digits.startswith(_PRIORITY_PREFIX):
        digits = digits[len(_PRIORITY_PREFIX):]
    if not _PRIORITY_DIGITS.fullmatch(digits):
        raise ValueError(f"invalid priority: {src!r}")
    value = int(digits)
    if value > 255:
        raise ValueError(f"priority out of range: {src!r}")
    return value