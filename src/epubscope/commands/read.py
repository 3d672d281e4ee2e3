"""Read command implementation."""

from pathlib import Path

from rich.console import Console

from epubscope.config import ReaderConfig
from epubscope.core.epub_parser import EpubParser
from epubscope.core.windowing import section_info
from epubscope.errors import FormatError, RangeError

MARKDOWN_OFFSET_HINT = (
    "IMPORTANT: You are reading Markdown, but the offset you provided might be "
    "from a search result's HTML offset. Use the Markdown offset from search "
    "results when reading Markdown."
)


def resolve_chapter(parser: EpubParser, chapter: str) -> str:
    """Turn a 1-based chapter number or an archive path into a path."""
    if chapter.isdigit():
        chapters = parser.chapters()
        index = int(chapter)
        if not 1 <= index <= len(chapters):
            raise FormatError(
                f"Chapter {index} out of range (book has {len(chapters)} chapters)"
            )
        return chapters[index - 1].path
    return chapter


def execute_read(
    book_path: Path,
    chapter: str,
    markdown: bool,
    offset: int,
    length: int | None,
    config: ReaderConfig,
    console: Console,
) -> None:
    """Print a window of a chapter followed by section info."""
    parser = EpubParser(book_path, config)
    path = resolve_chapter(parser, chapter)

    try:
        window = parser.read_chapter(path, offset, length, markdown=markdown)
    except RangeError:
        if markdown:
            console.print(f"[yellow]{MARKDOWN_OFFSET_HINT}[/]")
        raise

    console.print(window.slice, markup=False, highlight=False, soft_wrap=True)
    if window.has_more:
        console.print(
            f"\n[dim]... \\[CONTENT TRUNCATED. Total length: "
            f"{window.total_length} characters] ...[/]"
        )
    if window.has_more or offset > 0:
        console.print()
        console.print(section_info(window), style="dim", markup=False)
