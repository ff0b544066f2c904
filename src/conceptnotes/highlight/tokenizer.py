"""Line-oriented lexical tokenizer for code highlighting.

Each line is tokenized on its own: no state is carried between lines, so a
``/*`` without a closing ``*/`` on the same line is not treated as an open
comment. Concatenating the content of a line's tokens always reproduces the
original line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from conceptnotes.highlight.vocabulary import CSHARP, LanguageVocabulary
from conceptnotes.utils.text import split_lines


class TokenType(str, Enum):
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    STRING = "string"
    NUMBER = "number"
    KEYWORD = "keyword"
    TYPE = "type"
    METHOD = "method"
    PROPERTY = "property"
    OPERATOR = "operator"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    content: str


@dataclass(slots=True)
class Line:
    line_number: int
    tokens: List[Token] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(token.content for token in self.tokens)


OPERATORS = frozenset("{}()[];,.=+-*/<>!&|")

_WHITESPACE = re.compile(r"\s+")
_STRING = re.compile(r'"(?:[^"\\]|\\.)*"')
_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_CALL_OPEN = re.compile(r"\s*\(")


def _classify_identifier(
    identifier: str, line: str, end: int, vocabulary: LanguageVocabulary
) -> TokenType:
    if identifier in vocabulary.keywords:
        return TokenType.KEYWORD
    if identifier in vocabulary.types:
        return TokenType.TYPE
    if _CALL_OPEN.match(line, end):
        return TokenType.METHOD
    if identifier[0].isupper():
        return TokenType.TYPE
    return TokenType.PROPERTY


def _next_token(line: str, pos: int, vocabulary: LanguageVocabulary) -> Tuple[Token, int]:
    """Return the token starting at ``pos`` and the position after it."""
    match = _WHITESPACE.match(line, pos)
    if match:
        return Token(TokenType.WHITESPACE, match.group()), match.end()

    if line.startswith("//", pos):
        return Token(TokenType.COMMENT, line[pos:]), len(line)

    if line.startswith("/*", pos):
        close = line.find("*/", pos + 2)
        if close != -1:
            end = close + 2
            return Token(TokenType.COMMENT, line[pos:end]), end

    match = _STRING.match(line, pos)
    if match:
        return Token(TokenType.STRING, match.group()), match.end()

    match = _NUMBER.match(line, pos)
    if match:
        return Token(TokenType.NUMBER, match.group()), match.end()

    match = _IDENTIFIER.match(line, pos)
    if match:
        identifier = match.group()
        kind = _classify_identifier(identifier, line, match.end(), vocabulary)
        return Token(kind, identifier), match.end()

    char = line[pos]
    kind = TokenType.OPERATOR if char in OPERATORS else TokenType.TEXT
    return Token(kind, char), pos + 1


def tokenize(
    line: str,
    *,
    line_number: int = 1,
    vocabulary: Optional[LanguageVocabulary] = None,
) -> Line:
    """Classify a single line of source code into highlightable tokens.

    Never fails for string input: anything unrecognised becomes a one
    character ``text`` token.
    """
    if not isinstance(line, str):
        raise TypeError(f"tokenize() expects str, got {type(line).__name__}")
    if line_number < 1:
        raise ValueError("line_number must be positive")

    vocab = vocabulary or CSHARP
    tokens: List[Token] = []
    pos = 0
    while pos < len(line):
        token, pos = _next_token(line, pos, vocab)
        tokens.append(token)
    return Line(line_number=line_number, tokens=tokens)


def tokenize_source(
    source: str, *, vocabulary: Optional[LanguageVocabulary] = None
) -> List[Line]:
    """Tokenize a multi-line source, one independent call per line.

    An empty source is a single empty line 1.
    """
    if not isinstance(source, str):
        raise TypeError(f"tokenize_source() expects str, got {type(source).__name__}")
    return [
        tokenize(text, line_number=index, vocabulary=vocabulary)
        for index, text in enumerate(split_lines(source) or [""], start=1)
    ]
