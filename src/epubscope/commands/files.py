"""Archive entry listing and extraction."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from epubscope.config import ReaderConfig
from epubscope.core.epub_parser import EpubParser


def execute_files(book_path: Path, config: ReaderConfig, console: Console) -> None:
    for name in EpubParser(book_path, config).files():
        console.print(name, markup=False, highlight=False)


def execute_extract(
    book_path: Path,
    entry: str,
    output: Path | None,
    config: ReaderConfig,
    console: Console,
) -> None:
    """Write an archive entry to a file, or print it when it is text."""
    data = EpubParser(book_path, config).read_file(entry)

    if output is not None:
        output.write_bytes(data)
        console.print(f"[green]Wrote {len(data):,} bytes to {escape(str(output))}[/]")
        return

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        console.print(
            f"[yellow]{escape(entry)} is binary ({len(data):,} bytes); use --output[/]"
        )
        return
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def execute_cover(
    book_path: Path, output: Path | None, config: ReaderConfig, console: Console
) -> None:
    """Save the cover image declared by the package document."""
    cover = EpubParser(book_path, config).cover()
    if cover is None:
        console.print("[yellow]No cover image declared[/]")
        return

    cover_path, data = cover
    target = output or Path(Path(cover_path).name)
    target.write_bytes(data)
    console.print(f"[green]Saved cover {escape(cover_path)} to {escape(str(target))}[/]")
