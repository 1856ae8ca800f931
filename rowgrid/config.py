"""
Grid Configuration

Application-wide defaults used when a collection or renderer is created
without explicit values.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int, int]


def parse_color(color: str | Color) -> Color:
    """
    Parse a color value into RGBA tuple.

    Accepts:
    - Hex string: "#RRGGBB" or "#RRGGBBAA" (e.g., "#4c4c4c" or "#4c4c4cff")
    - Tuple: (R, G, B, A) where each value is 0-255

    Returns:
    - Tuple of (R, G, B, A) values from 0-255
    """
    if isinstance(color, str):
        hex_digits = color.lstrip("#")

        try:
            if len(hex_digits) == 6:
                r, g, b = (int(hex_digits[i : i + 2], 16) for i in (0, 2, 4))
                return (r, g, b, 0xFF)
            if len(hex_digits) == 8:
                r, g, b, a = (int(hex_digits[i : i + 2], 16) for i in (0, 2, 4, 6))
                return (r, g, b, a)
        except ValueError:
            pass
        raise ValueError(f"Invalid color format: {color}. Use #RRGGBB or #RRGGBBAA")
    elif isinstance(color, tuple) and len(color) == 4:
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
            raise ValueError(f"Color components must be ints in 0-255: {color}")
        return color
    else:
        raise ValueError(
            f"Invalid color type: {type(color)}. Use hex string or RGBA tuple"
        )


@dataclass
class GridConfig:
    """Grid defaults and renderer styling."""

    # Default spacing between rows and between items in a row
    small_margin: int = 8

    background_color: str | Color = "#2e3440"
    cell_color: str | Color = "#3b4252"
    text_color: str | Color = "#d8dee9"
    font_family: str = "sans-serif"
    font_size: int = 11

    def __post_init__(self):
        """Parse color strings into tuples."""
        if self.small_margin < 0:
            raise ValueError(f"small_margin must be >= 0, got {self.small_margin}")
        self.background_color = parse_color(self.background_color)
        self.cell_color = parse_color(self.cell_color)
        self.text_color = parse_color(self.text_color)


DEFAULT_CONFIG = GridConfig()
