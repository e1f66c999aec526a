"""Weighted range-scoring classifier over the archetype catalog."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .catalogs import ArchetypeDefinition, archetype_catalog
from .config import ClassifierCfg
from .observability import EventHook, emit
from .parameters import WEIGHTED_PARAMETERS, ParameterVector
from .scoring import range_score

__all__ = [
    "ClassificationEntry",
    "aggregate_probability",
    "classify",
    "round_half_up",
]

_DEFAULT_CFG = ClassifierCfg()


@dataclass(frozen=True)
class ClassificationEntry:
    """An archetype paired with its rounded aggregate probability."""

    archetype: ArchetypeDefinition
    probability: float

    @property
    def name(self) -> str:
        return self.archetype.name

    @property
    def description(self) -> str:
        return self.archetype.description

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "probability": self.probability,
        }


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round to ``decimals`` places with halves rounded away from zero."""

    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def aggregate_probability(
    vector: ParameterVector,
    archetype: ArchetypeDefinition,
    weights: Mapping[str, float],
) -> float:
    """Weighted mean of the per-parameter range scores for ``archetype``."""

    total_score = 0.0
    total_weight = 0.0
    for name in WEIGHTED_PARAMETERS:
        weight = weights[name]
        total_score += range_score(vector.value(name), archetype.interval(name)) * weight
        total_weight += weight
    if total_weight <= 0.0:
        return 0.0
    return total_score / total_weight


def classify(
    vector: ParameterVector,
    *,
    settings: ClassifierCfg | None = None,
    catalog: Sequence[ArchetypeDefinition] | None = None,
    hook: EventHook | None = None,
) -> list[ClassificationEntry]:
    """Rank catalog archetypes for ``vector``.

    Archetypes whose aggregate probability is at or below the threshold are
    dropped, as are those whose rounded probability falls to the threshold.
    The rest are sorted by descending probability; ties keep catalog order.
    """

    cfg = settings or _DEFAULT_CFG
    archetypes = archetype_catalog() if catalog is None else catalog

    entries: list[ClassificationEntry] = []
    for archetype in archetypes:
        probability = aggregate_probability(vector, archetype, cfg.weights)
        if not probability > cfg.threshold:
            continue
        rounded = round_half_up(probability, cfg.decimals)
        if not rounded > cfg.threshold:
            continue
        entries.append(ClassificationEntry(archetype=archetype, probability=rounded))

    ranked = sorted(entries, key=lambda entry: -entry.probability)
    emit(
        hook,
        "classifier.ranked",
        count=len(ranked),
        top=ranked[0].name if ranked else None,
        probabilities={entry.name: entry.probability for entry in ranked},
    )
    return ranked
