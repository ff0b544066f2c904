"""Block and inline elements produced by the markup parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Union


@dataclass(frozen=True, slots=True)
class Plain:
    text: str


@dataclass(frozen=True, slots=True)
class Bold:
    text: str


@dataclass(frozen=True, slots=True)
class Italic:
    text: str


@dataclass(frozen=True, slots=True)
class InlineCode:
    text: str


Span = Union[Plain, Bold, Italic, InlineCode]


@dataclass(frozen=True, slots=True)
class Paragraph:
    spans: List[Span] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Quote:
    spans: List[Span] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Bullet:
    spans: List[Span] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Numbered:
    ordinal: int
    spans: List[Span] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Break:
    pass


Block = Union[Paragraph, Quote, Bullet, Numbered, Break]


def span_text(spans: Sequence[Span]) -> str:
    """Concatenate span contents with markup markers stripped."""
    return "".join(span.text for span in spans)
