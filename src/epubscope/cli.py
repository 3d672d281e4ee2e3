"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from epubscope.commands.files import execute_cover, execute_extract, execute_files
from epubscope.commands.info import execute_chapters, execute_info, execute_toc
from epubscope.config import SNIPPET_WINDOW, ReaderConfig
from epubscope.errors import EpubscopeError

app = typer.Typer(
    name="epubscope",
    help="Inspect, read and search EPUB files chapter by chapter.",
    add_completion=False,
)

console = Console()

BookPath = Annotated[
    Path,
    typer.Argument(
        help="Path to the EPUB file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
JsonFlag = Annotated[
    bool,
    typer.Option("--json", help="Print JSON instead of a table"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Inspect, read and search EPUB files chapter by chapter."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def info(book_path: BookPath) -> None:
    """Display book metadata and chapter list."""
    try:
        execute_info(book_path, ReaderConfig(), console)
    except EpubscopeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def chapters(book_path: BookPath, as_json: JsonFlag = False) -> None:
    """List chapters in their linear reading order."""
    try:
        execute_chapters(book_path, as_json, ReaderConfig(), console)
    except EpubscopeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def toc(book_path: BookPath, as_json: JsonFlag = False) -> None:
    """Show the navigation document's table of contents."""
    try:
        execute_toc(book_path, as_json, ReaderConfig(), console)
    except EpubscopeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def read(
    book_path: BookPath,
    chapter: Annotated[
        str,
        typer.Argument(help="Chapter path (from 'chapters') or 1-based chapter number"),
    ],
    html: Annotated[
        bool,
        typer.Option("--html", help="Read raw HTML instead of Markdown"),
    ] = False,
    offset: Annotated[
        int,
        typer.Option("--offset", "-o", help="Character offset to start from", min=0),
    ] = 0,
    length: Annotated[
        Optional[int],
        typer.Option(
            "--length",
            "-n",
            help="Number of characters to return (default: 30000)",
            min=1,
            envvar="EPUBSCOPE_WINDOW_LENGTH",
        ),
    ] = None,
) -> None:
    """Read a chapter, one window of characters at a time."""
    from epubscope.commands.read import execute_read

    try:
        execute_read(
            book_path=book_path,
            chapter=chapter,
            markdown=not html,
            offset=offset,
            length=length,
            config=ReaderConfig(),
            console=console,
        )
    except EpubscopeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def search(
    book_path: BookPath,
    query: Annotated[str, typer.Argument(help="Literal text to search for")],
    as_json: JsonFlag = False,
    snippet_window: Annotated[
        int,
        typer.Option(
            "--snippet-window",
            "-w",
            help="Characters of context on each side of a hit",
            min=0,
            envvar="EPUBSCOPE_SNIPPET_WINDOW",
        ),
    ] = SNIPPET_WINDOW,
) -> None:
    """Search all chapters for a literal string (no boolean operators)."""
    from epubscope.commands.search import execute_search

    try:
        execute_search(
            book_path,
            query,
            as_json,
            ReaderConfig(snippet_window=snippet_window),
            console,
        )
    except EpubscopeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def files(book_path: BookPath) -> None:
    """List every file inside the EPUB."""
    try:
        execute_files(book_path, ReaderConfig(), console)
    except EpubscopeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def extract(
    book_path: BookPath,
    entry: Annotated[str, typer.Argument(help="Internal file path in the EPUB")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
) -> None:
    """Retrieve any file from the EPUB (e.g. CSS, images)."""
    try:
        execute_extract(book_path, entry, output, ReaderConfig(), console)
    except EpubscopeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def cover(
    book_path: BookPath,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output image path"),
    ] = None,
) -> None:
    """Save the book's cover image."""
    try:
        execute_cover(book_path, output, ReaderConfig(), console)
    except EpubscopeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
