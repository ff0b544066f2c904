"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from conceptnotes.highlight.theme import CodeTheme, get_theme
from conceptnotes.highlight.vocabulary import DEFAULT_LANGUAGE, LanguageVocabulary, get_vocabulary

RECORDS_ENV_VAR = "CONCEPTNOTES_RECORDS"


def _get_default_records_path() -> Path:
    """Environment override, then a local data/ file, then the Documents folder."""
    override = os.environ.get(RECORDS_ENV_VAR)
    if override:
        return Path(override).expanduser()

    local_records = Path("data/concepts.json")
    if local_records.exists():
        return local_records
    return Path.home() / "Documents" / "ConceptNotes" / "concepts.json"


@dataclass(slots=True)
class AppConfig:
    records_path: Path | None = None
    theme: str = "dark"
    language: str = DEFAULT_LANGUAGE
    result_limit: int = 10

    def __post_init__(self) -> None:
        if self.records_path is None:
            self.records_path = _get_default_records_path()
        if self.result_limit < 1:
            raise ValueError(f"result_limit must be at least 1, got {self.result_limit}")
        get_theme(self.theme)
        get_vocabulary(self.language)

    @property
    def code_theme(self) -> CodeTheme:
        return get_theme(self.theme)

    @property
    def vocabulary(self) -> LanguageVocabulary:
        return get_vocabulary(self.language)

    def resolve_records_path(self, base_dir: Path | None = None) -> Path:
        """Expand ``~`` and anchor relative record paths on ``base_dir``."""
        path = Path(self.records_path).expanduser()
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        return path
