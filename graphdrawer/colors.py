from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import re


_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6})$")


class PaletteColor(IntEnum):
    """Packed 24-bit RGB values of the built-in series colors."""

    COLOR_ONE = 0xDD2D2D
    COLOR_TWO = 0x31B033
    COLOR_THREE = 0x3331B0
    COLOR_FOUR = 0xB031AE
    COLOR_FIVE = 0xFC6C2D


@dataclass(frozen=True)
class Color:
    """RGBA color with normalized channels."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def to_rgba8(self) -> tuple[int, int, int, int]:
        return (
            _channel_to_byte(self.red),
            _channel_to_byte(self.green),
            _channel_to_byte(self.blue),
            _channel_to_byte(self.alpha),
        )


def hex_to_color(hex_value: int, alpha: float = 1.0) -> Color:
    """Usage: hex_to_color(0xFC0ACE, alpha=0.25). Alpha is passed through as given."""
    return Color(
        red=((hex_value >> 16) & 0xFF) / 255,
        green=((hex_value >> 8) & 0xFF) / 255,
        blue=(hex_value & 0xFF) / 255,
        alpha=float(alpha),
    )


def parse_hex_color(text: str, alpha: float = 1.0) -> Color:
    match = _HEX_COLOR.match(text.strip())
    if match is None:
        raise ValueError(f"`{text}` is not a hex color (#RRGGBB)")
    return hex_to_color(int(match.group(1), 16), alpha)


COLORS: tuple[Color, ...] = tuple(hex_to_color(int(c), 1.0) for c in PaletteColor)

WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)


def color_at(index: int) -> Color:
    return COLORS[index % len(COLORS)]


def _channel_to_byte(value: float) -> int:
    return int(round(max(0.0, min(1.0, value)) * 255))
