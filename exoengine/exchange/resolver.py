"""Remote classification with a guaranteed local fallback.

Transport is the caller's concern: the resolver receives a callable that
takes the wire request and returns the decoded JSON response. Any failure
on that path (exception, timeout, malformed payload) is logged and answered
with the local classifier and similarity metric instead.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Optional

from pydantic import ValidationError

from ..classifier import classify
from ..config import Settings, default_settings
from ..errors import RemoteClassificationError, UnknownArchetypeError
from ..observability import (
    CLASSIFICATION_FALLBACKS,
    REMOTE_CLASSIFICATION_DURATION,
    EventHook,
    emit,
)
from ..parameters import ParameterVector
from ..scoring import similarity
from ..targets import TargetPreset, find_target_parameters
from .schemas import ClassificationOut, ClassificationRequest, ClassificationResponse

__all__ = [
    "AsyncRemoteClassifier",
    "RemoteClassifier",
    "ResolvedClassification",
    "aresolve_classification",
    "local_classification",
    "resolve_classification",
]

LOG = logging.getLogger(__name__)

RemoteClassifier = Callable[[dict[str, Any]], Mapping[str, Any]]
AsyncRemoteClassifier = Callable[[dict[str, Any]], Awaitable[Mapping[str, Any]]]

Source = Literal["remote", "local"]


@dataclass(frozen=True)
class ResolvedClassification:
    response: ClassificationResponse
    source: Source
    fallback_reason: Optional[str] = None


def _target_vector(
    request: ClassificationRequest,
    target: ParameterVector | TargetPreset | None,
) -> ParameterVector:
    if isinstance(target, TargetPreset):
        return target.parameters
    if target is not None:
        return target
    resolved = find_target_parameters(request.target_exoplanet)
    if resolved is None:
        raise UnknownArchetypeError(request.target_exoplanet)
    return resolved


def local_classification(
    request: ClassificationRequest,
    target: ParameterVector | TargetPreset | None = None,
    *,
    settings: Settings | None = None,
    hook: EventHook | None = None,
) -> ClassificationResponse:
    """Answer ``request`` with the local classifier and similarity metric.

    ``target`` defaults to the vector named by ``request.target_exoplanet``
    (a drawable preset or an archetype reference); an unknown name raises
    :class:`UnknownArchetypeError`.
    """

    cfg = settings or default_settings()
    guess = request.parameters.to_vector()
    target_vector = _target_vector(request, target)
    ranked = classify(guess, settings=cfg.classifier, hook=hook)
    return ClassificationResponse(
        classifications=[ClassificationOut(**entry.to_payload()) for entry in ranked],
        similarity=similarity(guess, target_vector, weights=cfg.classifier.weights),
    )


def _fallback(
    request: ClassificationRequest,
    target: ParameterVector,
    error: RemoteClassificationError,
    *,
    settings: Settings,
    hook: EventHook | None,
) -> ResolvedClassification:
    LOG.warning(
        "exchange.fallback",
        extra={"reason": error.reason, "error": str(error), "target": request.target_exoplanet},
    )
    CLASSIFICATION_FALLBACKS.labels(reason=error.reason).inc()
    emit(hook, "exchange.fallback", reason=error.reason, error=str(error))
    response = local_classification(request, target, settings=settings, hook=hook)
    return ResolvedClassification(response=response, source="local", fallback_reason=error.reason)


def _validate(raw: Any) -> ClassificationResponse:
    try:
        return ClassificationResponse.model_validate(raw)
    except ValidationError as exc:
        raise RemoteClassificationError(
            "malformed", f"remote response failed validation: {exc.error_count()} error(s)"
        ) from exc


def resolve_classification(
    request: ClassificationRequest,
    remote: RemoteClassifier | None = None,
    *,
    target: ParameterVector | TargetPreset | None = None,
    settings: Settings | None = None,
    hook: EventHook | None = None,
) -> ResolvedClassification:
    """Classify through ``remote`` when given, otherwise (or on failure) locally.

    The target is resolved first; an unknown ``target_exoplanet`` raises
    :class:`UnknownArchetypeError` without contacting ``remote``.
    """

    cfg = settings or default_settings()
    # Unknown targets raise here, before any remote call.
    target_vector = _target_vector(request, target)
    if remote is None:
        response = local_classification(request, target_vector, settings=cfg, hook=hook)
        return ResolvedClassification(response=response, source="local")

    try:
        with REMOTE_CLASSIFICATION_DURATION.time():
            try:
                raw = remote(request.to_wire())
            except Exception as exc:
                raise RemoteClassificationError("error", repr(exc)) from exc
        response = _validate(raw)
    except RemoteClassificationError as exc:
        return _fallback(request, target_vector, exc, settings=cfg, hook=hook)

    emit(hook, "exchange.remote_ok", classifications=len(response.classifications))
    return ResolvedClassification(response=response, source="remote")


async def aresolve_classification(
    request: ClassificationRequest,
    remote: AsyncRemoteClassifier | None = None,
    *,
    target: ParameterVector | TargetPreset | None = None,
    settings: Settings | None = None,
    hook: EventHook | None = None,
) -> ResolvedClassification:
    """Async variant bounding the remote call by ``settings.exchange.timeout_s``."""

    cfg = settings or default_settings()
    # Unknown targets raise here, before any remote call.
    target_vector = _target_vector(request, target)
    if remote is None:
        response = local_classification(request, target_vector, settings=cfg, hook=hook)
        return ResolvedClassification(response=response, source="local")

    started = time.perf_counter()
    try:
        try:
            raw = await asyncio.wait_for(remote(request.to_wire()), timeout=cfg.exchange.timeout_s)
        except asyncio.TimeoutError as exc:
            raise RemoteClassificationError(
                "timeout", f"no response within {cfg.exchange.timeout_s:.1f}s"
            ) from exc
        except Exception as exc:
            raise RemoteClassificationError("error", repr(exc)) from exc
        finally:
            REMOTE_CLASSIFICATION_DURATION.observe(time.perf_counter() - started)
        response = _validate(raw)
    except RemoteClassificationError as exc:
        return _fallback(request, target_vector, exc, settings=cfg, hook=hook)

    emit(hook, "exchange.remote_ok", classifications=len(response.classifications))
    return ResolvedClassification(response=response, source="remote")
