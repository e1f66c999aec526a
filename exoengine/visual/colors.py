"""Color constants and helpers for visual descriptors.

Colors are carried as ``0xRRGGBB`` integers and rendered as ``#rrggbb``.
"""

from __future__ import annotations

import math

from ..parameters import ParameterVector

__all__ = [
    "ATMOSPHERE_COLD",
    "ATMOSPHERE_HOT",
    "ATMOSPHERE_TEMPERATE",
    "DEFAULT_PLANET_COLOR",
    "DEFAULT_STAR_COLOR",
    "DEFAULT_STAR_LIGHT_COLOR",
    "atmosphere_color_for",
    "format_color",
    "parse_color",
    "planet_tint",
]

ATMOSPHERE_COLD = 0x87CEEB  # pale blue
ATMOSPHERE_TEMPERATE = 0x98FB98  # pale green
ATMOSPHERE_HOT = 0xFF4500  # orange-red

DEFAULT_PLANET_COLOR = 0xFFFFFF
DEFAULT_STAR_COLOR = 0xFFFF00
DEFAULT_STAR_LIGHT_COLOR = 0xFFF5C0


def parse_color(value: int | str) -> int:
    """Accept ``0xRRGGBB`` integers or ``#rrggbb`` / ``rrggbb`` strings."""

    if isinstance(value, bool):
        raise ValueError(f"not a color: {value!r}")
    if isinstance(value, int):
        color = value
    elif isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("#"):
            text = text[1:]
        elif text.startswith("0x"):
            text = text[2:]
        if len(text) != 6:
            raise ValueError(f"not a color: {value!r}")
        color = int(text, 16)
    else:
        raise ValueError(f"not a color: {value!r}")
    if not 0 <= color <= 0xFFFFFF:
        raise ValueError(f"color out of range: {value!r}")
    return color


def format_color(color: int) -> str:
    return f"#{color:06x}"


def atmosphere_color_for(temperature: float) -> int | None:
    """Bucket ``temperature`` (K) into an atmosphere color; ``None`` for NaN."""

    if math.isnan(temperature):
        return None
    if temperature < 200.0:
        return ATMOSPHERE_COLD
    if temperature < 400.0:
        return ATMOSPHERE_TEMPERATE
    return ATMOSPHERE_HOT


def planet_tint(vector: ParameterVector) -> int:
    """Surface tint from temperature bands, shifted toward blue by water content.

    Intended as a caller-supplied ``base_color`` override when no preset
    applies.
    """

    temperature = vector.temperature
    if temperature < 250:
        r, g, b = 100, 150, 255
    elif temperature < 350:
        r, g, b = 100, 200, 150
    elif temperature < 500:
        r, g, b = 200, 200, 100
    else:
        r, g, b = 255, 150, 100

    water = vector.composition / 100.0
    if not math.isfinite(water):
        water = 0.0
    water = max(0.0, min(1.0, water))
    r = math.floor(r * (1 - water * 0.3))
    g = math.floor(g * (1 - water * 0.2))
    b = min(255, math.floor(b + water * 50))
    return (r << 16) | (g << 8) | b
