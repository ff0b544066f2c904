"""Core concept record model."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

# Keys used by the legacy mobile export format.
LEGACY_KEYS: Dict[str, str] = {
    "topicID": "id",
    "detailedExplanation": "long_description",
    "whenToUse": "usage_notes",
    "whyNeed": "rationale",
    "codeExample": "code_sample",
    "keyword": "keywords",
    "longDescription": "long_description",
    "usageNotes": "usage_notes",
    "codeSample": "code_sample",
}

TEXT_FIELDS = (
    "title",
    "definition",
    "long_description",
    "usage_notes",
    "rationale",
    "code_sample",
    "keywords",
    "comparisons",
)


@dataclass(slots=True)
class Concept:
    """A structured learning note."""

    id: int
    title: str = ""
    definition: str = ""
    long_description: str = ""
    usage_notes: str = ""
    rationale: str = ""
    code_sample: str = ""
    keywords: str = ""
    comparisons: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Concept":
        """Build a concept from a mapping, accepting legacy export keys."""
        normalized: Dict[str, Any] = {}
        for key, value in data.items():
            normalized[LEGACY_KEYS.get(key, key)] = value

        raw_id = normalized.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"Concept id must be an integer, got {raw_id!r}")

        fields = {name: str(normalized.get(name) or "") for name in TEXT_FIELDS}
        return cls(id=raw_id, **fields)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
