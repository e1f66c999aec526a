"""Structured event callbacks for callers that want to observe the engine."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

__all__ = ["EventHook", "emit"]

LOG = logging.getLogger(__name__)

EventHook = Callable[[str, Mapping[str, Any]], None]


def emit(hook: EventHook | None, name: str, **fields: Any) -> None:
    """Log ``name`` at DEBUG level and forward it to ``hook`` when supplied.

    A failing hook is logged and otherwise ignored so that observers can never
    change the outcome of a computation.
    """

    LOG.debug(name, extra={"event": name, "fields": fields})
    if hook is None:
        return
    try:
        hook(name, dict(fields))
    except Exception as exc:
        LOG.warning(
            "observability.hook_failed",
            extra={"event": name, "error": repr(exc)},
        )
