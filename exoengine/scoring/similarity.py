"""Symmetric closeness between a guessed and a target parameter vector."""

from __future__ import annotations

import math
from collections.abc import Mapping

from ..parameters import WEIGHTED_PARAMETERS, ParameterVector
from .weights import PARAMETER_WEIGHTS

__all__ = ["parameter_similarity", "similarity"]


def parameter_similarity(guess: float, target: float) -> float:
    """Return ``1 - |guess - target| / max(guess, target, 1)``.

    The ``1`` floor keeps the denominator positive for small magnitudes.
    Non-finite inputs contribute nothing.
    """

    guess = float(guess)
    target = float(target)
    if not (math.isfinite(guess) and math.isfinite(target)):
        return 0.0
    return 1.0 - abs(guess - target) / max(guess, target, 1.0)


def similarity(
    guess: ParameterVector,
    target: ParameterVector,
    *,
    weights: Mapping[str, float] | None = None,
) -> float:
    """Weighted similarity of ``guess`` to ``target`` clamped into ``[0, 1]``.

    Brightness is not part of the metric.
    """

    table = PARAMETER_WEIGHTS if weights is None else weights
    total = 0.0
    for name in WEIGHTED_PARAMETERS:
        total += parameter_similarity(guess.value(name), target.value(name)) * table[name]
    return max(0.0, min(1.0, total))
