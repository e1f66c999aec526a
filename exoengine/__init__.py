"""exoengine package bootstrap and curated public API surface.

The engine classifies a planetary parameter vector against a fixed archetype
catalog, scores its similarity to a target, and derives the rendering
parameters a planet or star with those properties should have.
"""

from __future__ import annotations

import logging

try:
    from importlib.metadata import PackageNotFoundError, version as _get_version
except ImportError:  # pragma: no cover
    from importlib_metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("exoengine")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .bodies import BodyRole, CelestialBody, PlanetPayload, StarPayload, make_planet, make_star
from .catalogs import ArchetypeDefinition, archetype_catalog, find_archetype, get_archetype
from .classifier import ClassificationEntry, classify
from .errors import (
    CatalogError,
    ExoEngineError,
    RemoteClassificationError,
    UnknownArchetypeError,
)
from .feedback import SimilarityBand, is_match, similarity_band
from .logging_config import configure_logging
from .parameters import (
    DEFAULT_PARAMETERS,
    PARAMETER_SPECS,
    ParameterVector,
    clamp_to_bounds,
)
from .scoring import PARAMETER_WEIGHTS, range_score, similarity
from .targets import TargetPreset, select_target, target_presets
from .visual import (
    ShellLayer,
    ShellRole,
    VisualDescriptor,
    VisualPresetProfile,
    derive_visual,
    descriptor_for_body,
    get_visual_preset,
    planet_tint,
    top_classification_preset,
)


def get_version() -> str:
    """Return the resolved exoengine package version."""

    return __version__


__all__ = [
    "__version__",
    "get_version",
    "ArchetypeDefinition",
    "BodyRole",
    "CatalogError",
    "CelestialBody",
    "ClassificationEntry",
    "DEFAULT_PARAMETERS",
    "ExoEngineError",
    "PARAMETER_SPECS",
    "PARAMETER_WEIGHTS",
    "ParameterVector",
    "PlanetPayload",
    "RemoteClassificationError",
    "ShellLayer",
    "ShellRole",
    "SimilarityBand",
    "StarPayload",
    "TargetPreset",
    "UnknownArchetypeError",
    "VisualDescriptor",
    "VisualPresetProfile",
    "archetype_catalog",
    "clamp_to_bounds",
    "classify",
    "configure_logging",
    "derive_visual",
    "descriptor_for_body",
    "find_archetype",
    "get_archetype",
    "get_visual_preset",
    "is_match",
    "make_planet",
    "make_star",
    "planet_tint",
    "range_score",
    "select_target",
    "similarity",
    "similarity_band",
    "target_presets",
    "top_classification_preset",
]
