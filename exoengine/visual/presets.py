"""Named visual preset profiles keyed by archetype name."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Optional

from ..errors import CatalogError
from ..profiles import load_profile_table
from .colors import parse_color

if TYPE_CHECKING:  # pragma: no cover
    from ..classifier import ClassificationEntry

__all__ = [
    "VisualPresetProfile",
    "get_visual_preset",
    "top_classification_preset",
    "visual_presets",
]

_PRESETS_FILE = "visual_presets.json"
_COLOR_FIELDS = frozenset({"base_color", "atmosphere_color"})


@dataclass(frozen=True)
class VisualPresetProfile:
    """Overrides for derived visual fields; ``None`` means not overridden."""

    name: str
    base_color: Optional[int] = None
    atmosphere_color: Optional[int] = None
    surface_variation: Optional[float] = None
    glow_intensity: Optional[float] = None
    roughness: Optional[float] = None
    metalness: Optional[float] = None
    emissive_intensity: Optional[float] = None

    @classmethod
    def from_mapping(cls, name: str, data: Mapping[str, Any]) -> VisualPresetProfile:
        known = {f.name for f in fields(cls)} - {"name"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise CatalogError(f"preset '{name}' has unknown fields {unknown}")
        values: dict[str, Any] = {}
        for key, raw in data.items():
            if raw is None:
                continue
            try:
                values[key] = parse_color(raw) if key in _COLOR_FIELDS else float(raw)
            except (TypeError, ValueError) as exc:
                raise CatalogError(f"preset '{name}' field {key}={raw!r} is invalid") from exc
        return cls(name=name, **values)


@lru_cache(maxsize=1)
def visual_presets() -> Mapping[str, VisualPresetProfile]:
    """Return the packaged presets, loaded once per process."""

    table = load_profile_table(_PRESETS_FILE)
    raw = table.get("presets")
    if not isinstance(raw, Mapping):
        raise CatalogError(f"'{_PRESETS_FILE}' must map preset names to profiles")
    return MappingProxyType(
        {str(name): VisualPresetProfile.from_mapping(str(name), data) for name, data in raw.items()}
    )


def get_visual_preset(name: str | None) -> VisualPresetProfile | None:
    """Return the preset called ``name``; unknown or empty names give ``None``."""

    if not name:
        return None
    return visual_presets().get(name)


def top_classification_preset(
    classifications: Sequence[ClassificationEntry],
) -> VisualPresetProfile | None:
    """Preset matching the top-ranked classification, if any."""

    if not classifications:
        return None
    return get_visual_preset(classifications[0].name)
