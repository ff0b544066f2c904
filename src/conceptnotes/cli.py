"""Command line interface for ConceptNotes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from conceptnotes.config import AppConfig
from conceptnotes.highlight.theme import CodeTheme
from conceptnotes.highlight.tokenizer import Line, tokenize_source
from conceptnotes.highlight.vocabulary import DEFAULT_LANGUAGE, LanguageVocabulary
from conceptnotes.index.collection import ConceptCollection
from conceptnotes.markup.elements import (
    Block,
    Bold,
    Break,
    Bullet,
    InlineCode,
    Italic,
    Numbered,
    Quote,
    Span,
    span_text,
)
from conceptnotes.markup.parser import parse
from conceptnotes.models import Concept
from conceptnotes.utils.files import load_concepts


console = Console()
app = typer.Typer(help="ConceptNotes - highlight, render and search learning notes")

DETAIL_SECTIONS = (
    ("Definition", "definition"),
    ("Explanation", "long_description"),
    ("When to use", "usage_notes"),
    ("Why it matters", "rationale"),
    ("Comparisons", "comparisons"),
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_config(
    records: Optional[Path] = None, *, theme: str = "dark", language: str = DEFAULT_LANGUAGE
) -> AppConfig:
    try:
        return AppConfig(records_path=records, theme=theme, language=language)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_collection(config: AppConfig) -> ConceptCollection:
    resolved = config.resolve_records_path(Path.cwd())
    if not resolved.exists():
        raise typer.BadParameter(f"Records file not found: {resolved}")
    try:
        concepts = load_concepts(resolved)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return ConceptCollection(concepts)


def plain_text(value: str) -> str:
    """Markup-free, single-line rendering of a text field."""
    return " ".join(
        span_text(block.spans) for block in parse(value) if not isinstance(block, Break)
    )


def highlight_lines(lines: Iterable[Line], theme: CodeTheme, *, line_numbers: bool = True) -> Text:
    """Render token lines as coloured rich text."""
    lines = list(lines)
    width = len(str(len(lines))) if lines else 1
    output = Text()
    for line in lines:
        if line_numbers:
            output.append(f"{line.line_number:>{width}}  ", style=theme.line_number)
        for token in line.tokens:
            output.append(token.content, style=theme.color_for(token.type))
        output.append("\n")
    return output


def _render_spans(spans: List[Span], output: Text) -> None:
    for span in spans:
        if isinstance(span, Bold):
            output.append(span.text, style="bold")
        elif isinstance(span, Italic):
            output.append(span.text, style="italic")
        elif isinstance(span, InlineCode):
            output.append(span.text, style="bold cyan")
        else:
            output.append(span.text)


def render_blocks(blocks: Iterable[Block]) -> Text:
    """Render parsed blocks as rich text."""
    output = Text()
    for block in blocks:
        if isinstance(block, Break):
            output.append("\n")
            continue
        if isinstance(block, Quote):
            output.append("│ ", style="dim")
        elif isinstance(block, Bullet):
            output.append("  • ")
        elif isinstance(block, Numbered):
            output.append(f"  {block.ordinal}. ")
        _render_spans(block.spans, output)
        output.append("\n")
    return output


@app.command()
def highlight(
    path: Path = typer.Argument(..., help="Source file to highlight."),
    theme: str = typer.Option(AppConfig().theme, help="Colour theme (dark or light)"),
    language: str = typer.Option(AppConfig().language, help="Keyword vocabulary"),
    line_numbers: bool = typer.Option(True, "--line-numbers/--no-line-numbers", help="Show line numbers"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print a source file with syntax colouring."""
    _setup_logging(verbose)
    if not path.is_file():
        raise typer.BadParameter(f"File not found: {path}")

    config = _build_config(theme=theme, language=language)
    lines = tokenize_source(path.read_text(encoding="utf-8"), vocabulary=config.vocabulary)
    console.print(highlight_lines(lines, config.code_theme, line_numbers=line_numbers), end="")


@app.command()
def render(
    path: Path = typer.Argument(..., help="Markup file to render."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print a markup file with formatting applied."""
    _setup_logging(verbose)
    if not path.is_file():
        raise typer.BadParameter(f"File not found: {path}")

    blocks = parse(path.read_text(encoding="utf-8"))
    console.print(render_blocks(blocks), end="")


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text"),
    records: Path = typer.Option(None, "--records", help="JSON file with concepts"),
    limit: int = typer.Option(AppConfig().result_limit, help="Number of results to display"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search concepts by title, keywords and text."""
    _setup_logging(verbose)
    collection = _load_collection(_build_config(records))

    results = collection.search(query)[: max(limit, 0)]
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Keywords")
    table.add_column("Definition")

    for concept in results:
        snippet = plain_text(concept.definition)
        table.add_row(str(concept.id), concept.title, concept.keywords, snippet[:120])

    console.print(table)


def render_concept(concept: Concept, theme: CodeTheme, vocabulary: LanguageVocabulary) -> Text:
    output = Text()
    output.append(concept.title, style="bold underline")
    output.append("\n")
    if concept.keywords:
        output.append(concept.keywords, style="magenta")
        output.append("\n")

    for heading, field_name in DETAIL_SECTIONS:
        value = getattr(concept, field_name)
        if not value:
            continue
        output.append(f"\n{heading}\n", style="bold")
        output.append_text(render_blocks(parse(value)))

    if concept.code_sample:
        output.append(f"\nCode example ({vocabulary.label})\n", style="bold")
        lines = tokenize_source(concept.code_sample, vocabulary=vocabulary)
        output.append_text(highlight_lines(lines, theme))
    return output


@app.command()
def show(
    concept_id: int = typer.Argument(..., help="Concept id"),
    records: Path = typer.Option(None, "--records", help="JSON file with concepts"),
    theme: str = typer.Option(AppConfig().theme, help="Colour theme (dark or light)"),
    language: str = typer.Option(AppConfig().language, help="Keyword vocabulary"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show one concept with formatted text and highlighted code."""
    _setup_logging(verbose)
    config = _build_config(records, theme=theme, language=language)
    collection = _load_collection(config)

    concept = collection.get(concept_id)
    if concept is None:
        console.print(f"[red]Concept not found: {concept_id}[/red]")
        raise typer.Exit(code=1)

    console.print(render_concept(concept, config.code_theme, config.vocabulary), end="")
