# echotext/codec/colors.py
# Color <-> 24-bit integer packing
# Pure functions, never raise

from __future__ import annotations

import math
import re
from typing import Any

MAX_COLOR = 0xFFFFFF

_HEX6 = re.compile(r"^[0-9A-Fa-f]{6}$")


def color_to_int(value: Any) -> int:
    """
    Pack a hex color into an integer in [0, 0xFFFFFF].

    Accepts #RGB or #RRGGBB, with or without the leading '#'.
    Returns 0 (black) for anything else.
    """
    if not isinstance(value, str):
        return 0
    hex_color = value[1:] if value.startswith("#") else value
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    if not _HEX6.match(hex_color):
        return 0
    return int(hex_color, 16)


def int_to_color(value: Any) -> str:
    """Unpack an integer into '#rrggbb', clamping into range. Non-numbers give black."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "#000000"
    if isinstance(value, float):
        if math.isnan(value):
            return "#000000"
        if math.isinf(value):
            value = MAX_COLOR if value > 0 else 0
        value = int(value)
    value = max(0, min(MAX_COLOR, value))
    return f"#{value:06x}"


def normalize_color(value: Any) -> str:
    """Canonical '#rrggbb' form of any color input."""
    return int_to_color(color_to_int(value))
