"""Substring search over the concept collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from conceptnotes.models import Concept
from conceptnotes.utils.text import normalize_query, query_words

LOGGER = logging.getLogger(__name__)

SEARCH_FIELDS = (
    "title",
    "definition",
    "long_description",
    "usage_notes",
    "rationale",
    "keywords",
    "comparisons",
)


def build_search_text(concept: Concept) -> str:
    """Lowercased, space-joined text used for matching a concept."""
    return " ".join(getattr(concept, name) for name in SEARCH_FIELDS).lower()


@dataclass(frozen=True, slots=True)
class IndexSnapshot:
    """Immutable view of the records and their derived search text."""

    entries: Tuple[Tuple[Concept, str], ...] = ()

    @classmethod
    def build(cls, records: Sequence[Concept]) -> "IndexSnapshot":
        return cls(entries=tuple((record, build_search_text(record)) for record in records))

    @property
    def records(self) -> List[Concept]:
        return [record for record, _ in self.entries]

    @property
    def search_text(self) -> Dict[int, str]:
        return {record.id: text for record, text in self.entries}

    def __len__(self) -> int:
        return len(self.entries)


def _rank_key(concept: Concept, needle: str) -> Tuple[bool, bool]:
    # False sorts first: title hits, then keyword hits, then original order.
    return (needle not in concept.title.lower(), needle not in concept.keywords.lower())


class SearchIndex:
    """Answers ranked queries against the latest snapshot.

    ``rebuild`` swaps in a freshly built snapshot with a single assignment, so
    a concurrent ``search`` sees either the old index or the new one.
    """

    def __init__(self, records: Sequence[Concept] = ()) -> None:
        self._snapshot = IndexSnapshot()
        if records:
            self.rebuild(records)

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    def rebuild(self, records: Sequence[Concept]) -> IndexSnapshot:
        if not isinstance(records, (list, tuple)):
            raise TypeError(f"rebuild() expects a list of concepts, got {type(records).__name__}")
        for record in records:
            if not isinstance(record, Concept):
                raise TypeError(f"rebuild() expects Concept items, got {type(record).__name__}")

        snapshot = IndexSnapshot.build(records)
        self._snapshot = snapshot
        LOGGER.debug("Search index rebuilt with %d records", len(snapshot))
        return snapshot

    def search(self, query: str, *, limit: Optional[int] = None) -> List[Concept]:
        """Return records containing every query word, best matches first.

        A blank query returns every record in collection order.
        """
        if not isinstance(query, str):
            raise TypeError(f"search() expects str, got {type(query).__name__}")

        snapshot = self._snapshot
        needle = normalize_query(query)
        if not needle:
            return snapshot.records

        words = query_words(query)
        matches = [
            record
            for record, text in snapshot.entries
            if all(word in text for word in words)
        ]
        matches.sort(key=lambda record: _rank_key(record, needle))
        if limit is not None:
            matches = matches[: max(limit, 0)]
        return matches
