"""Minimal markdown-like parser for concept text fields.

Each line becomes one block. Inline markup is extracted in precedence order:
all ``**bold**`` pairs first, then ``*italic*`` pairs in the text between
them, then backtick code in what is left. Markers without a closing partner
on the same line stay literal text.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple, Type

from conceptnotes.markup.elements import (
    Block,
    Bold,
    Break,
    Bullet,
    InlineCode,
    Italic,
    Numbered,
    Paragraph,
    Plain,
    Quote,
    Span,
)
from conceptnotes.utils.text import split_lines

QUOTE_PREFIX = "> "
BULLET_PREFIX = "- "
FENCE_MARKER = "```"

_NUMBERED = re.compile(r"([0-9]+)\. ")

# Precedence order: bold pairs are fixed before any italic or code pair.
_DELIMITERS: Sequence[Tuple[str, Type[Span]]] = (
    ("**", Bold),
    ("*", Italic),
    ("`", InlineCode),
)


def _scan_pairs(text: str, delimiters: Sequence[Tuple[str, Type[Span]]]) -> List[Span]:
    """Extract pairs of the first delimiter, then scan the gaps with the rest.

    Pairs are leftmost and shortest. Lower-precedence delimiters are only
    looked for between these pairs, so they never pair across one.
    """
    if not text:
        return []
    if not delimiters:
        return [Plain(text)]

    (marker, span_type), lower = delimiters[0], delimiters[1:]
    spans: List[Span] = []
    pos = 0
    while True:
        start = text.find(marker, pos)
        if start == -1:
            break
        close = text.find(marker, start + len(marker))
        if close == -1:
            break
        spans.extend(_scan_pairs(text[pos:start], lower))
        spans.append(span_type(text[start + len(marker) : close]))
        pos = close + len(marker)
    spans.extend(_scan_pairs(text[pos:], lower))
    return spans


def extract_spans(text: str) -> List[Span]:
    """Split one line of content into plain and formatted spans."""
    if not isinstance(text, str):
        raise TypeError(f"extract_spans() expects str, got {type(text).__name__}")
    return _scan_pairs(text, _DELIMITERS)


def classify_line(line: str) -> Optional[Block]:
    """Turn a single line into its block element.

    Returns ``None`` for fenced-code marker lines, which are not rendered.
    """
    if not line.strip():
        return Break()
    if line.startswith(QUOTE_PREFIX):
        return Quote(extract_spans(line[len(QUOTE_PREFIX) :]))
    if line.startswith(BULLET_PREFIX):
        return Bullet(extract_spans(line[len(BULLET_PREFIX) :]))
    match = _NUMBERED.match(line)
    if match:
        return Numbered(int(match.group(1)), extract_spans(line[match.end() :]))
    if line.startswith(FENCE_MARKER):
        return None
    return Paragraph(extract_spans(line))


def parse(text: str) -> List[Block]:
    """Parse a text blob into an ordered list of block elements."""
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")

    blocks: List[Block] = []
    for line in split_lines(text):
        block = classify_line(line)
        if block is not None:
            blocks.append(block)
    return blocks
