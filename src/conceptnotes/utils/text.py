"""Text helpers shared by the parser, highlighter and search index."""

from __future__ import annotations

import re
from typing import List

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    """Split text on line breaks, tolerating Windows line endings.

    An empty string yields no lines; a trailing break yields a trailing empty line.
    """
    if not text:
        return []
    return _LINE_BREAK.split(text)


def normalize_query(query: str) -> str:
    """Trim and lowercase a search query."""
    return query.strip().lower()


def query_words(query: str) -> List[str]:
    """Split a normalized query into whitespace-separated words."""
    return normalize_query(query).split()
