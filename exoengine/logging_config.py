"""Logging helpers for applications embedding exoengine.

Library modules only create loggers; handlers are attached here on request
and only to the ``exoengine`` namespace, never to the root logger.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

__all__ = ["LOG_LEVEL_ENV_VAR", "configure_logging"]

LOG_LEVEL_ENV_VAR = "EXOENGINE_LOG_LEVEL"

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(value: str | int | None) -> int:
    """Level names (any case) or numbers; anything else maps to ``INFO``."""

    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper()) if text else None
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    *,
    level: str | int | None = None,
    log_file: str | Path | None = None,
) -> int:
    """Send ``exoengine`` log records to stderr and optionally to ``log_file``.

    ``level`` falls back to the ``EXOENGINE_LOG_LEVEL`` environment variable.
    Calling again replaces the handlers installed by the previous call.
    Returns the effective level.
    """

    effective = _coerce_level(os.environ.get(LOG_LEVEL_ENV_VAR) if level is None else level)
    logger = logging.getLogger("exoengine")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(effective)
    return effective
