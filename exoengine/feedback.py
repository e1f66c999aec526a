"""Banding of similarity scores into player-facing feedback."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from .config import FeedbackCfg

__all__ = ["SimilarityBand", "SimilarityFeedback", "is_match", "similarity_band"]

_DEFAULT_CFG = FeedbackCfg()


class SimilarityBand(StrEnum):
    PERFECT = "perfect"
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


_MESSAGES: dict[SimilarityBand, str] = {
    SimilarityBand.PERFECT: "Perfect! It's an almost exact match!",
    SimilarityBand.EXCELLENT: "Excellent! Very close to the target!",
    SimilarityBand.GOOD: "Good! You're getting closer!",
    SimilarityBand.FAIR: "Fair. Try adjusting some parameters.",
    SimilarityBand.POOR: "Keep trying! You're still far from the target.",
}

# Lower bounds, checked from the top.
_BAND_FLOORS: tuple[tuple[float, SimilarityBand], ...] = (
    (0.99, SimilarityBand.PERFECT),
    (0.8, SimilarityBand.EXCELLENT),
    (0.6, SimilarityBand.GOOD),
    (0.4, SimilarityBand.FAIR),
)


@dataclass(frozen=True)
class SimilarityFeedback:
    band: SimilarityBand
    percent: int
    message: str


def similarity_band(similarity: float) -> SimilarityFeedback:
    """Classify ``similarity`` into a feedback band with a display percentage."""

    band = SimilarityBand.POOR
    for floor, candidate in _BAND_FLOORS:
        if similarity >= floor:
            band = candidate
            break
    clamped = 0.0 if math.isnan(similarity) else max(0.0, min(1.0, similarity))
    percent = math.floor(clamped * 100 + 0.5)
    return SimilarityFeedback(band=band, percent=percent, message=_MESSAGES[band])


def is_match(similarity: float, settings: FeedbackCfg | None = None) -> bool:
    """``True`` when ``similarity`` reaches the configured win threshold."""

    cfg = settings or _DEFAULT_CFG
    return similarity >= cfg.win_threshold
