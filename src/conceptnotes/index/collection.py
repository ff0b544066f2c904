"""In-memory concept collection that keeps the search index current."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from conceptnotes.index.search import SearchIndex
from conceptnotes.models import Concept

LOGGER = logging.getLogger(__name__)

REQUIRED_IMPORT_FIELDS = ("title", "definition", "long_description", "keywords")


def _is_importable(concept: Concept) -> bool:
    return concept.id > 0 and all(getattr(concept, name) for name in REQUIRED_IMPORT_FIELDS)


class ConceptCollection:
    """Owns the ordered records and rebuilds the index once per change."""

    def __init__(self, concepts: Iterable[Concept] = ()) -> None:
        self._concepts: List[Concept] = list(concepts)
        self.index = SearchIndex()
        self._reindex()

    def __len__(self) -> int:
        return len(self._concepts)

    @property
    def concepts(self) -> List[Concept]:
        return list(self._concepts)

    def _next_id(self) -> int:
        return max((concept.id for concept in self._concepts), default=0) + 1

    def _reindex(self) -> None:
        self.index.rebuild(tuple(self._concepts))

    def get(self, concept_id: int) -> Optional[Concept]:
        for concept in self._concepts:
            if concept.id == concept_id:
                return concept
        return None

    def add(self, concept: Concept) -> Concept:
        """Store a new concept under the next free id."""
        stored = replace(concept, id=self._next_id())
        self._concepts.append(stored)
        self._reindex()
        return stored

    def update(self, concept: Concept) -> bool:
        for position, existing in enumerate(self._concepts):
            if existing.id == concept.id:
                self._concepts[position] = concept
                self._reindex()
                return True
        return False

    def delete(self, concept_id: int) -> bool:
        remaining = [concept for concept in self._concepts if concept.id != concept_id]
        if len(remaining) == len(self._concepts):
            return False
        self._concepts = remaining
        self._reindex()
        return True

    def import_concepts(self, concepts: Sequence[Concept]) -> int:
        """Replace the collection with the valid entries of ``concepts``.

        Ids that would collide with the current collection are reassigned
        above the current maximum.
        """
        valid: List[Concept] = []
        for concept in concepts:
            if _is_importable(concept):
                valid.append(concept)
            else:
                LOGGER.warning("Skipping incomplete concept on import: id=%s", concept.id)

        max_existing = max((concept.id for concept in self._concepts), default=0)
        self._concepts = [
            concept if concept.id > max_existing else replace(concept, id=max_existing + position + 1)
            for position, concept in enumerate(valid)
        ]
        self._reindex()
        LOGGER.info("Imported %d concepts", len(valid))
        return len(valid)

    def export_concepts(self) -> List[Concept]:
        return list(self._concepts)

    def search(self, query: str, *, limit: Optional[int] = None) -> List[Concept]:
        return self.index.search(query, limit=limit)
