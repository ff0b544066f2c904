"""Tests for the substring search index."""

from __future__ import annotations

import pytest

from conceptnotes.index.search import IndexSnapshot, SearchIndex, build_search_text
from conceptnotes.models import Concept


def _concept(concept_id: int, title: str, **fields: str) -> Concept:
    return Concept(id=concept_id, title=title, **fields)


class TestBuildSearchText:
    """Test search text derivation."""

    def test_joins_fields_in_order(self) -> None:
        """Should lowercase and join the searchable fields."""
        concept = Concept(
            id=1,
            title="DI",
            definition="Def",
            long_description="Long",
            usage_notes="Use",
            rationale="Why",
            code_sample="IGNORED",
            keywords="Kw",
            comparisons="Cmp",
        )

        assert build_search_text(concept) == "di def long use why kw cmp"

    def test_excludes_code_sample(self) -> None:
        """Code samples are not searched."""
        concept = _concept(1, "Title", code_sample="HttpClient")
        assert "httpclient" not in build_search_text(concept)


class TestIndexSnapshot:
    """Test the immutable snapshot."""

    def test_search_text_mapping(self) -> None:
        """Should expose the id to search text mapping."""
        snapshot = IndexSnapshot.build([_concept(4, "Alpha", keywords="One")])
        assert snapshot.search_text == {4: "alpha" + " " * 5 + "one "}
        assert len(snapshot) == 1

    def test_rebuild_replaces_snapshot(self) -> None:
        """Rebuild swaps in a new snapshot without touching the old one."""
        index = SearchIndex([_concept(1, "Alpha")])
        old = index.snapshot

        index.rebuild([_concept(1, "Alpha"), _concept(2, "Beta")])

        assert index.snapshot is not old
        assert len(old) == 1
        assert len(index.snapshot) == 2


class TestSearchIndex:
    """Test ranked search."""

    def test_empty_query_passes_through(self) -> None:
        """Blank queries return every record in order."""
        records = [_concept(1, "A"), _concept(2, "B")]
        index = SearchIndex(records)

        assert index.search("") == records
        assert index.search("   ") == records

    def test_empty_query_ignores_limit(self) -> None:
        """Pass-through is not truncated."""
        records = [_concept(i, f"T{i}") for i in range(1, 4)]
        assert len(SearchIndex(records).search("", limit=1)) == 3

    def test_and_substring_semantics(self) -> None:
        """Every query word must be a substring of the search text."""
        record = _concept(1, "Pattern", long_description="dependency injection pattern")
        index = SearchIndex([record])

        assert index.search("dep pat") == [record]
        assert index.search("dep xyz") == []

    def test_case_insensitive(self) -> None:
        """Queries are lowercased before matching."""
        record = _concept(1, "Dependency Injection")
        assert SearchIndex([record]).search("  DEPENDENCY  ") == [record]

    def test_title_match_ranks_first(self) -> None:
        """Title hits sort before other matches."""
        body_hit = _concept(1, "Alpha", definition="uses a cache")
        title_hit = _concept(2, "Cache basics")

        assert SearchIndex([body_hit, title_hit]).search("cache") == [title_hit, body_hit]

    def test_keyword_match_ranks_second(self) -> None:
        """Keyword hits sort after title hits but before the rest."""
        body_hit = _concept(1, "Alpha", definition="about di")
        keyword_hit = _concept(2, "Beta", keywords="DI, IoC")
        title_hit = _concept(3, "DI container")

        result = SearchIndex([body_hit, keyword_hit, title_hit]).search("di")

        assert result == [title_hit, keyword_hit, body_hit]

    def test_ranking_uses_full_query(self) -> None:
        """Ranking compares the whole query string, not single words."""
        title_words = _concept(1, "Dependency Injection")
        keyword_phrase = _concept(2, "Other", keywords="injection dependency")

        result = SearchIndex([title_words, keyword_phrase]).search("injection dependency")

        assert result == [keyword_phrase, title_words]

    def test_ties_keep_collection_order(self) -> None:
        """Equal ranks preserve original order."""
        first = _concept(1, "One", definition="shared term")
        second = _concept(2, "Two", definition="shared term")

        assert SearchIndex([first, second]).search("shared") == [first, second]

    def test_limit(self) -> None:
        """Limit truncates ranked matches."""
        records = [_concept(i, f"Match {i}") for i in range(1, 6)]
        result = SearchIndex(records).search("match", limit=2)
        assert [record.id for record in result] == [1, 2]

    def test_result_is_a_new_list(self) -> None:
        """Callers can mutate results without touching the index."""
        index = SearchIndex([_concept(1, "A")])
        index.search("").clear()
        assert len(index.search("")) == 1

    def test_rejects_non_string_query(self) -> None:
        """Non-string queries are contract violations."""
        with pytest.raises(TypeError):
            SearchIndex().search(42)  # type: ignore[arg-type]

    def test_rejects_non_list_records(self) -> None:
        """Rebuild requires a list of concepts."""
        with pytest.raises(TypeError):
            SearchIndex().rebuild({"id": 1})  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            SearchIndex().rebuild([{"id": 1}])  # type: ignore[list-item]
