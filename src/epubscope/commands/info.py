"""Info, chapters and toc command implementations."""

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from epubscope.config import ReaderConfig
from epubscope.core.epub_parser import EpubParser
from epubscope.models.book import Chapter, TOCEntry


def display_chapters(
    chapters: list[Chapter],
    console: Console,
    word_counts: list[int] | None = None,
) -> None:
    """Display chapters in reading order."""
    table = Table(title="Chapters", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("Path", style="dim")
    table.add_column("Bytes", justify="right", style="green")
    if word_counts is not None:
        table.add_column("Words", justify="right", style="green")

    for i, chapter in enumerate(chapters):
        row = [
            str(i + 1),
            escape(chapter.title),
            escape(chapter.path),
            f"{chapter.size:,}",
        ]
        if word_counts is not None:
            row.append(f"{word_counts[i]:,}")
        table.add_row(*row)

    console.print(table)


def display_toc(toc: list[TOCEntry], console: Console) -> None:
    """Display table of contents."""
    table = Table(title="Table of Contents", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("Path", style="dim")

    for i, entry in enumerate(toc):
        table.add_row(str(i + 1), escape(entry.title), escape(entry.path))

    console.print(table)


def execute_info(book_path: Path, config: ReaderConfig, console: Console) -> None:
    """Display book metadata and chapter list."""
    parser = EpubParser(book_path, config)
    parsed = parser.parse()
    metadata = parsed.metadata
    word_counts = [parser.word_count(c.path) for c in parsed.chapters]

    info_lines = [
        f"[bold]{escape(metadata.title)}[/]",
        "",
        f"[dim]Author(s):[/] {escape(', '.join(metadata.authors)) or 'Unknown'}",
        f"[dim]Language:[/] {escape(metadata.language or 'Unknown')}",
        f"[dim]Publisher:[/] {escape(metadata.publisher or 'Unknown')}",
        f"[dim]Chapters:[/] {len(parsed.chapters)}",
        f"[dim]TOC entries:[/] {len(parsed.toc)}",
    ]
    if metadata.cover_path:
        info_lines.append(f"[dim]Cover:[/] {escape(metadata.cover_path)}")

    console.print()
    console.print(
        Panel(
            "\n".join(info_lines),
            title="Book Information",
            border_style="green",
        )
    )
    console.print()
    display_chapters(parsed.chapters, console, word_counts)
    console.print()


def execute_chapters(
    book_path: Path, as_json: bool, config: ReaderConfig, console: Console
) -> None:
    """List chapters in reading order."""
    chapters = EpubParser(book_path, config).chapters()
    if as_json:
        console.print_json(json.dumps([c.model_dump() for c in chapters]))
    else:
        display_chapters(chapters, console)


def execute_toc(
    book_path: Path, as_json: bool, config: ReaderConfig, console: Console
) -> None:
    """List navigation entries."""
    toc = EpubParser(book_path, config).toc()
    if as_json:
        console.print_json(json.dumps([e.model_dump() for e in toc]))
    elif not toc:
        console.print("[dim]No navigation document found[/]")
    else:
        display_toc(toc, console)
