"""Selection of the hidden target archetype.

This is the only place in the package that draws random numbers; the random
source is always passed in or created locally.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from .errors import CatalogError
from .observability import EventHook, emit
from .parameters import ParameterVector
from .profiles import load_profile_table

__all__ = [
    "TargetPreset",
    "find_target_parameters",
    "reference_parameters",
    "select_target",
    "target_presets",
]

_TARGETS_FILE = "targets.json"


@dataclass(frozen=True)
class TargetPreset:
    """A named archetype with its canonical parameter vector."""

    name: str
    parameters: ParameterVector

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name, "parameters": self.parameters.to_payload()}


def _load_presets(section: str) -> tuple[TargetPreset, ...]:
    table = load_profile_table(_TARGETS_FILE)
    entries = table.get(section)
    if not isinstance(entries, list) or not entries:
        raise CatalogError(f"'{_TARGETS_FILE}' must list at least one entry under '{section}'")
    presets = []
    for entry in entries:
        try:
            presets.append(
                TargetPreset(
                    name=str(entry["name"]),
                    parameters=ParameterVector.from_mapping(entry["parameters"]),
                )
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"malformed {section} entry: {entry!r}") from exc
    return tuple(presets)


@lru_cache(maxsize=1)
def target_presets() -> tuple[TargetPreset, ...]:
    """Return the drawable target presets in declaration order."""

    return _load_presets("targets")


@lru_cache(maxsize=1)
def reference_parameters() -> Mapping[str, ParameterVector]:
    """Reference parameter vector of every catalog archetype, keyed by name."""

    return MappingProxyType(
        {preset.name: preset.parameters for preset in _load_presets("references")}
    )


def find_target_parameters(name: str) -> ParameterVector | None:
    """Resolve a target name to its vector.

    Drawable presets take precedence over the archetype references; unknown
    names give ``None``.
    """

    for preset in target_presets():
        if preset.name == name:
            return preset.parameters
    return reference_parameters().get(name)


def select_target(
    rng: random.Random | None = None,
    *,
    hook: EventHook | None = None,
) -> TargetPreset:
    """Draw one target preset uniformly at random.

    Pass a seeded :class:`random.Random` to make the draw reproducible. When
    ``rng`` is omitted a fresh, OS-seeded generator is used.
    """

    presets = target_presets()
    source = rng if rng is not None else random.Random()
    chosen = presets[source.randrange(len(presets))]
    emit(hook, "target.selected", target=chosen.name)
    return chosen
