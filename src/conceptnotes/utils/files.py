"""Utility helpers for working with files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from conceptnotes.models import Concept

LOGGER = logging.getLogger(__name__)


def load_concepts(path: Path) -> List[Concept]:
    """Read concepts from a JSON array or a ``{"concepts": [...]}`` object."""
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    if isinstance(payload, dict):
        payload = payload.get("concepts")
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of concepts in {path}")

    concepts: List[Concept] = []
    for position, entry in enumerate(payload):
        if not isinstance(entry, dict):
            LOGGER.warning("Skipping entry %d in %s: not an object", position, path)
            continue
        try:
            concepts.append(Concept.from_dict(entry))
        except ValueError as exc:
            LOGGER.warning("Skipping entry %d in %s: %s", position, path, exc)
    return concepts

