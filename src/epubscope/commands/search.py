"""Search command implementation."""

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from epubscope.config import ReaderConfig
from epubscope.core.epub_parser import EpubParser
from epubscope.core.search import validate_literal_query
from epubscope.models.search import SearchMatch

USAGE_NOTE = (
    "Use 'markdown_offset' when reading Markdown and 'html_offset' when "
    "reading raw HTML."
)


def simplify(match: SearchMatch) -> dict:
    """Compact result record; prefers the Markdown snippet."""
    return {
        "chapter_title": match.chapter_title,
        "chapter_path": match.chapter_path,
        "html_offset": match.html_offset,
        "markdown_offset": match.markdown_offset,
        "snippet": match.markdown_snippet or match.html_snippet,
        "correlation_uncertain": match.correlation_uncertain,
        "usage_note": USAGE_NOTE,
    }


def display_matches(matches: list[SearchMatch], query: str, console: Console) -> None:
    table = Table(
        title=f"{len(matches)} match(es) for '{escape(query)}'",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Chapter", style="white")
    table.add_column("HTML", justify="right", style="dim")
    table.add_column("MD", justify="right", style="green")
    table.add_column("Snippet")

    for match in matches:
        md_offset = "-" if match.markdown_offset is None else str(match.markdown_offset)
        if match.correlation_uncertain:
            md_offset += "?"
        snippet = " ".join((match.markdown_snippet or match.html_snippet).split())
        table.add_row(
            escape(match.chapter_title), str(match.html_offset), md_offset, escape(snippet)
        )

    console.print(table)


def execute_search(
    book_path: Path,
    query: str,
    as_json: bool,
    config: ReaderConfig,
    console: Console,
) -> None:
    """Search a book for a literal string."""
    query = validate_literal_query(query)
    matches = EpubParser(book_path, config).search(query)

    if as_json:
        console.print_json(json.dumps([simplify(m) for m in matches]))
    elif not matches:
        console.print(f"[yellow]No matches for '{escape(query)}'[/]")
    else:
        display_matches(matches, query, console)
