"""Packaged JSON tables: archetype catalog, visual presets and target presets."""

from __future__ import annotations

import json
from copy import deepcopy
from functools import lru_cache
from importlib import resources as importlib_resources
from typing import Any

__all__ = ["load_profile_table"]


@lru_cache(maxsize=None)
def _read_profile(filename: str) -> dict[str, Any]:
    resource = importlib_resources.files(__name__).joinpath(filename)
    text = resource.read_text(encoding="utf-8")
    filtered = "\n".join(
        line for line in text.splitlines() if not line.strip().startswith("#")
    )
    data = json.loads(filtered)
    if not isinstance(data, dict):
        raise ValueError(f"Profile '{filename}' must contain a JSON object")
    return data


def load_profile_table(filename: str) -> dict[str, Any]:
    """Load one of the packaged profile documents.

    Lines starting with ``#`` are treated as comments and removed before the
    JSON payload is parsed. The file is read once per process; every call
    returns a fresh copy so callers cannot alter the packaged table.
    """

    return deepcopy(_read_profile(filename))
