"""Tests for ConceptCollection."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from conceptnotes.index.collection import ConceptCollection
from conceptnotes.models import Concept


def _complete(concept_id: int, title: str) -> Concept:
    return Concept(
        id=concept_id,
        title=title,
        definition="definition",
        long_description="details",
        keywords="kw",
    )


@pytest.fixture
def collection() -> ConceptCollection:
    return ConceptCollection([_complete(1, "Alpha"), _complete(5, "Beta")])


class TestMutations:
    """Test add, update and delete."""

    def test_add_assigns_next_id(self, collection: ConceptCollection) -> None:
        """New concepts get max id + 1."""
        stored = collection.add(Concept(id=0, title="Gamma"))

        assert stored.id == 6
        assert collection.concepts[-1] == stored

    def test_add_to_empty_collection(self) -> None:
        """The first concept gets id 1."""
        assert ConceptCollection().add(Concept(id=99, title="First")).id == 1

    def test_add_is_searchable(self, collection: ConceptCollection) -> None:
        """Added concepts are visible to search immediately."""
        collection.add(Concept(id=0, title="Gamma"))
        assert [c.title for c in collection.search("gamma")] == ["Gamma"]

    def test_update_replaces_in_place(self, collection: ConceptCollection) -> None:
        """Update keeps the record position."""
        assert collection.update(Concept(id=1, title="Renamed"))
        assert [c.title for c in collection.concepts] == ["Renamed", "Beta"]
        assert collection.search("alpha") == []

    def test_update_unknown_id(self, collection: ConceptCollection) -> None:
        """Unknown ids are ignored."""
        with patch.object(collection.index, "rebuild") as rebuild:
            assert not collection.update(Concept(id=42, title="Nope"))
        rebuild.assert_not_called()

    def test_delete(self, collection: ConceptCollection) -> None:
        """Delete removes the record."""
        assert collection.delete(1)
        assert collection.get(1) is None
        assert len(collection) == 1

    def test_delete_unknown_id(self, collection: ConceptCollection) -> None:
        """Deleting a missing id changes nothing."""
        assert not collection.delete(42)
        assert len(collection) == 2

    @pytest.mark.parametrize(
        "action",
        [
            lambda c: c.add(Concept(id=0, title="New")),
            lambda c: c.update(Concept(id=5, title="Changed")),
            lambda c: c.delete(5),
            lambda c: c.import_concepts([_complete(10, "Imported")]),
        ],
    )
    def test_rebuilds_once_per_change(self, collection: ConceptCollection, action) -> None:
        """Each mutation rebuilds the index exactly once."""
        with patch.object(collection.index, "rebuild", wraps=collection.index.rebuild) as rebuild:
            action(collection)
        rebuild.assert_called_once()


class TestImportExport:
    """Test import validation and export."""

    def test_import_replaces_collection(self, collection: ConceptCollection) -> None:
        """Imported concepts replace the existing ones."""
        count = collection.import_concepts([_complete(10, "Imported")])

        assert count == 1
        assert [c.title for c in collection.concepts] == ["Imported"]

    def test_import_skips_incomplete(
        self, collection: ConceptCollection, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Records missing required fields are dropped with a warning."""
        incomplete = Concept(id=11, title="No definition")
        with caplog.at_level(logging.WARNING):
            count = collection.import_concepts([incomplete, _complete(12, "Ok"), _complete(0, "Zero")])

        assert count == 1
        assert "Skipping incomplete concept" in caplog.text

    def test_import_reassigns_colliding_ids(self, collection: ConceptCollection) -> None:
        """Ids not above the current maximum are moved past it."""
        collection.import_concepts([_complete(3, "Low"), _complete(9, "High")])

        assert [c.id for c in collection.concepts] == [6, 9]

    def test_export_returns_copy(self, collection: ConceptCollection) -> None:
        """Export is detached from the collection."""
        exported = collection.export_concepts()
        exported.clear()

        assert len(collection) == 2
