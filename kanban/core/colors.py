"""
FILE: kanban/core/colors.py
PURPOSE: RGB color value and hex encoding
EXPORTS:
  - Color (frozen dataclass)
  - parse_color(text) -> Color
  - random_color() -> Color
DEPENDENCIES:
  - random (stdlib)
  - kanban.core.constants (palette)
  - kanban.core.exceptions (ParseError, InvalidInputError)
NOTES:
  - Channels are floats in [0, 1]; hex output uses round(channel * 255)
  - Alpha is kept in memory only, never written out
  - Decoding accepts #RRGGBB and #AARRGGBB
"""

import random
import re
from dataclasses import dataclass

from .constants import NAMED_COLORS, RANDOM_PALETTE
from .exceptions import ParseError, InvalidInputError

_HEX_RE = re.compile(r"#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")


def _to_byte(channel: float) -> int:
    return max(0, min(255, int(round(channel * 255))))


@dataclass(frozen=True)
class Color:
    """An RGB color with float channels."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Color":
        """Build a color from 8-bit channels."""
        return cls(red / 255, green / 255, blue / 255, alpha / 255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """
        Decode "#RRGGBB" or "#AARRGGBB".

        Raises:
            ParseError: If value is not a hex color
        """
        if not isinstance(value, str) or not _HEX_RE.fullmatch(value):
            raise ParseError(f"bad color {value!r}")
        digits = value[1:]
        alpha = 255
        if len(digits) == 8:
            alpha = int(digits[0:2], 16)
            digits = digits[2:]
        return cls.from_rgb255(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16),
            alpha,
        )

    def to_rgb255(self) -> tuple:
        return _to_byte(self.red), _to_byte(self.green), _to_byte(self.blue)

    def to_hex(self) -> str:
        """Encode as uppercase "#RRGGBB" (alpha dropped)."""
        return "#%02X%02X%02X" % self.to_rgb255()

    def __str__(self) -> str:
        return self.to_hex()


def parse_color(text: str) -> Color:
    """
    Parse user input as a palette name or hex color.

    Args:
        text: "red", "LightGray", "#FF8800", "ff8800", ...

    Returns:
        Color (opaque)

    Raises:
        InvalidInputError: If text is neither a known name nor a hex color
    """
    value = text.strip()
    named = NAMED_COLORS.get(value.lower().replace(" ", "").replace("_", ""))
    if named:
        return Color.from_hex(named)

    if not value.startswith("#"):
        value = "#" + value
    try:
        color = Color.from_hex(value)
    except ParseError:
        names = ", ".join(sorted(NAMED_COLORS))
        raise InvalidInputError(
            f"Invalid color '{text}'. Use #RRGGBB or one of: {names}"
        )
    # User input is opaque
    return Color(color.red, color.green, color.blue)


def random_color() -> Color:
    """Pick a color from the quick-pick palette."""
    return Color.from_hex(NAMED_COLORS[random.choice(RANDOM_PALETTE)])
