"""Static archetype catalog."""

from __future__ import annotations

from .archetypes import (
    ArchetypeDefinition,
    archetype_catalog,
    archetype_names,
    build_catalog,
    find_archetype,
    get_archetype,
)

__all__ = [
    "ArchetypeDefinition",
    "archetype_catalog",
    "archetype_names",
    "build_catalog",
    "find_archetype",
    "get_archetype",
]
