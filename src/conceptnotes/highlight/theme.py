"""Colour palettes for rendering token streams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from conceptnotes.highlight.tokenizer import TokenType


@dataclass(frozen=True, slots=True)
class CodeTheme:
    name: str
    background: str
    text: str
    line_number: str
    colors: Dict[TokenType, str]

    def color_for(self, token_type: TokenType) -> str:
        return self.colors.get(token_type, self.text)


DARK = CodeTheme(
    name="dark",
    background="#1e1e1e",
    text="#d4d4d4",
    line_number="#858585",
    colors={
        TokenType.KEYWORD: "#569cd6",
        TokenType.STRING: "#ce9178",
        TokenType.COMMENT: "#6a9955",
        TokenType.TYPE: "#4ec9b0",
        TokenType.NUMBER: "#b5cea8",
        TokenType.METHOD: "#dcdcaa",
        TokenType.PROPERTY: "#9cdcfe",
        TokenType.OPERATOR: "#d4d4d4",
    },
)

LIGHT = CodeTheme(
    name="light",
    background="#f8f8f8",
    text="#383a42",
    line_number="#9d9d9f",
    colors={
        TokenType.KEYWORD: "#a626a4",
        TokenType.STRING: "#50a14f",
        TokenType.COMMENT: "#a0a1a7",
        TokenType.TYPE: "#c18401",
        TokenType.NUMBER: "#986801",
        TokenType.METHOD: "#4078f2",
        TokenType.PROPERTY: "#e45649",
        TokenType.OPERATOR: "#383a42",
    },
)

THEMES: Dict[str, CodeTheme] = {DARK.name: DARK, LIGHT.name: LIGHT}


def get_theme(name: str) -> CodeTheme:
    try:
        return THEMES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(THEMES))
        raise ValueError(f"Unknown theme {name!r} (known: {known})") from None
