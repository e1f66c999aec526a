"""Fixed catalog of planet archetypes and their accepted intervals."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from ..errors import CatalogError, UnknownArchetypeError
from ..parameters import WEIGHTED_PARAMETERS
from ..profiles import load_profile_table
from ..scoring.ranges import Interval

__all__ = [
    "ArchetypeDefinition",
    "archetype_catalog",
    "archetype_names",
    "build_catalog",
    "find_archetype",
    "get_archetype",
]

_CATALOG_FILE = "archetypes.json"


@dataclass(frozen=True)
class ArchetypeDefinition:
    """One named planet category with an interval per weighted parameter."""

    name: str
    description: str
    intervals: Mapping[str, Interval]

    def __post_init__(self) -> None:
        keys = set(self.intervals)
        if keys != set(WEIGHTED_PARAMETERS):
            raise CatalogError(
                f"archetype '{self.name}' must define intervals for {list(WEIGHTED_PARAMETERS)}"
            )
        frozen: dict[str, Interval] = {}
        for parameter in WEIGHTED_PARAMETERS:
            lower, upper = self.intervals[parameter]
            lower, upper = float(lower), float(upper)
            if lower > upper:
                raise CatalogError(
                    f"archetype '{self.name}' has inverted {parameter} interval [{lower}, {upper}]"
                )
            frozen[parameter] = (lower, upper)
        object.__setattr__(self, "intervals", MappingProxyType(frozen))

    def __hash__(self) -> int:
        return hash(self.name)

    def interval(self, parameter: str) -> Interval:
        return self.intervals[parameter]


def _coerce_entry(entry: Mapping[str, Any]) -> ArchetypeDefinition:
    try:
        name = str(entry["name"])
        raw_intervals = entry["intervals"]
    except (KeyError, TypeError) as exc:
        raise CatalogError(f"malformed archetype entry: {entry!r}") from exc
    if not isinstance(raw_intervals, Mapping):
        raise CatalogError(f"archetype '{name}' intervals must be a mapping")
    intervals: dict[str, Interval] = {}
    for parameter, bounds in raw_intervals.items():
        if not isinstance(bounds, Sequence) or len(bounds) != 2:
            raise CatalogError(f"archetype '{name}' {parameter} interval must be [min, max]")
        intervals[str(parameter)] = (float(bounds[0]), float(bounds[1]))
    return ArchetypeDefinition(
        name=name,
        description=str(entry.get("description", "")),
        intervals=intervals,
    )


def build_catalog(entries: Sequence[Mapping[str, Any]]) -> tuple[ArchetypeDefinition, ...]:
    """Validate raw archetype entries and return them in declaration order."""

    catalog = tuple(_coerce_entry(entry) for entry in entries)
    seen: set[str] = set()
    for archetype in catalog:
        if archetype.name in seen:
            raise CatalogError(f"duplicate archetype '{archetype.name}'")
        seen.add(archetype.name)
    return catalog


@lru_cache(maxsize=1)
def archetype_catalog() -> tuple[ArchetypeDefinition, ...]:
    """Return the packaged catalog, loaded once per process."""

    table = load_profile_table(_CATALOG_FILE)
    entries = table.get("archetypes")
    if not isinstance(entries, list):
        raise CatalogError(f"'{_CATALOG_FILE}' must list archetypes")
    return build_catalog(entries)


@lru_cache(maxsize=1)
def _index() -> Mapping[str, ArchetypeDefinition]:
    return MappingProxyType({archetype.name: archetype for archetype in archetype_catalog()})


def archetype_names() -> tuple[str, ...]:
    return tuple(archetype.name for archetype in archetype_catalog())


def find_archetype(name: str) -> ArchetypeDefinition | None:
    return _index().get(name)


def get_archetype(name: str) -> ArchetypeDefinition:
    """Strict lookup raising :class:`UnknownArchetypeError` for unknown names."""

    archetype = find_archetype(name)
    if archetype is None:
        raise UnknownArchetypeError(name)
    return archetype
