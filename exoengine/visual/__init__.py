"""Physical-to-visual derivation for planets and stars."""

from __future__ import annotations

from .colors import (
    ATMOSPHERE_COLD,
    ATMOSPHERE_HOT,
    ATMOSPHERE_TEMPERATE,
    atmosphere_color_for,
    format_color,
    parse_color,
    planet_tint,
)
from .derive import (
    OVERRIDE_FIELDS,
    VisualDescriptor,
    computed_metalness,
    computed_roughness,
    computed_surface_variation,
    derive_visual,
    descriptor_for_body,
)
from .presets import (
    VisualPresetProfile,
    get_visual_preset,
    top_classification_preset,
    visual_presets,
)
from .shells import BlendMode, ShellLayer, ShellRole, atmosphere_layers, corona_layers
from .surface import surface_jitter_bounds, surface_jitter_factor

__all__ = [
    "ATMOSPHERE_COLD",
    "ATMOSPHERE_HOT",
    "ATMOSPHERE_TEMPERATE",
    "BlendMode",
    "OVERRIDE_FIELDS",
    "ShellLayer",
    "ShellRole",
    "VisualDescriptor",
    "VisualPresetProfile",
    "atmosphere_color_for",
    "atmosphere_layers",
    "computed_metalness",
    "computed_roughness",
    "computed_surface_variation",
    "corona_layers",
    "derive_visual",
    "descriptor_for_body",
    "format_color",
    "get_visual_preset",
    "parse_color",
    "planet_tint",
    "surface_jitter_bounds",
    "surface_jitter_factor",
    "top_classification_preset",
    "visual_presets",
]
