"""Prometheus metric definitions for the classification exchange."""

from __future__ import annotations

from collections.abc import Iterable

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

__all__ = [
    "CLASSIFICATION_FALLBACKS",
    "REMOTE_CLASSIFICATION_DURATION",
    "ensure_metrics_registered",
]


REMOTE_CLASSIFICATION_DURATION = Histogram(
    "exoengine_remote_classification_seconds",
    "Duration of remote classification round-trips, successful or not.",
    registry=None,
)

CLASSIFICATION_FALLBACKS = Counter(
    "exoengine_classification_fallbacks_total",
    "Count of classifications served by the local engine after a remote failure.",
    ("reason",),
    registry=None,
)


def _iter_metrics() -> Iterable[Counter | Histogram]:
    yield REMOTE_CLASSIFICATION_DURATION
    yield CLASSIFICATION_FALLBACKS


def ensure_metrics_registered(registry: CollectorRegistry | None = None) -> None:
    """Register the exchange metrics with ``registry`` if not already present."""

    target = registry or REGISTRY
    for metric in _iter_metrics():
        try:
            target.register(metric)
        except ValueError:
            # Already registered under the same name.
            continue
