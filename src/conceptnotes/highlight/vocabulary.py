"""Keyword and type-name vocabularies used by the highlighter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet

DEFAULT_LANGUAGE = "csharp"


@dataclass(frozen=True, slots=True)
class LanguageVocabulary:
    name: str
    label: str
    keywords: FrozenSet[str]
    types: FrozenSet[str]


CSHARP = LanguageVocabulary(
    name="csharp",
    label="C#",
    keywords=frozenset(
        {
            "public", "private", "protected", "internal", "static", "readonly", "const",
            "class", "interface", "struct", "enum", "namespace", "using",
            "if", "else", "switch", "case", "default", "for", "foreach", "while", "do",
            "try", "catch", "finally", "throw", "return", "break", "continue",
            "new", "this", "base", "null", "true", "false",
            "string", "int", "bool", "double", "float", "decimal", "char", "byte",
            "void", "var", "object", "dynamic", "async", "await", "Task",
            "get", "set", "value", "override", "virtual", "abstract", "sealed",
        }
    ),
    types=frozenset(
        {
            "String", "Int32", "Boolean", "Double", "Float", "Decimal", "Char", "Byte",
            "List", "Dictionary", "Array", "IEnumerable", "IQueryable", "Task",
            "HttpClient", "DbContext", "IEmailService", "User", "Order",
        }
    ),
)

VOCABULARIES: Dict[str, LanguageVocabulary] = {CSHARP.name: CSHARP}


def get_vocabulary(name: str = DEFAULT_LANGUAGE) -> LanguageVocabulary:
    """Return the vocabulary registered under ``name``."""
    try:
        return VOCABULARIES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(VOCABULARIES))
        raise ValueError(f"Unknown language {name!r} (known: {known})") from None
