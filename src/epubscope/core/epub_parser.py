"""EPUB structure access for a single archive."""

from pathlib import Path

from epubscope.config import DEFAULT_CONFIG, ReaderConfig
from epubscope.core.archive import EpubArchive
from epubscope.core.chapters import assemble_chapters
from epubscope.core.content_processor import ContentProcessor
from epubscope.core.navigation import table_of_contents
from epubscope.core.package import load_package, parse_metadata
from epubscope.core.search import search_chapters
from epubscope.core.windowing import window_text
from epubscope.models.book import (
    BookMetadata,
    Chapter,
    PackageDocument,
    ParsedBook,
    TOCEntry,
)
from epubscope.models.search import ContentWindow, SearchMatch


class EpubParser:
    """Parse EPUB files and extract structure.

    Every call re-derives its result from the archive; nothing is cached.
    """

    def __init__(
        self,
        source: bytes | str | Path | EpubArchive,
        config: ReaderConfig = DEFAULT_CONFIG,
    ):
        self.archive = EpubArchive.open(source)
        self.config = config
        self.processor = ContentProcessor()

    def parse(self) -> ParsedBook:
        """Parse the EPUB and return complete structure."""
        document = load_package(self.archive, self.config.container_path)
        toc = table_of_contents(document, self.archive)
        return ParsedBook(
            metadata=parse_metadata(document),
            toc=toc,
            chapters=self._assemble(document, toc),
            spine_order=document.spine,
        )

    def metadata(self) -> BookMetadata:
        return parse_metadata(load_package(self.archive, self.config.container_path))

    def toc(self) -> list[TOCEntry]:
        document = load_package(self.archive, self.config.container_path)
        return table_of_contents(document, self.archive)

    def chapters(self) -> list[Chapter]:
        """Chapters in spine order."""
        document = load_package(self.archive, self.config.container_path)
        return self._assemble(document, table_of_contents(document, self.archive))

    def _assemble(self, document: PackageDocument, toc: list[TOCEntry]) -> list[Chapter]:
        titles = {entry.path: entry.title for entry in toc}
        return assemble_chapters(
            document, titles, self.archive, self.config.placeholder_title
        )

    def files(self) -> list[str]:
        """All entry names in the archive."""
        return self.archive.list_entries()

    def read_file(self, path: str) -> bytes:
        """Raw bytes of any archive entry.

        Raises:
            FormatError: If the entry does not exist
        """
        return self.archive.require_bytes(path)

    def chapter_html(self, path: str) -> str:
        """Raw markup of a chapter document."""
        return self.archive.require_text(path)

    def chapter_markdown(self, path: str) -> str:
        """Chapter converted to Markdown-flavored text."""
        return self.processor.to_markdown(self.chapter_html(path))

    def word_count(self, path: str) -> int:
        """Words in a chapter's Markdown, 0 when the document is missing."""
        markup = self.archive.read_text(path)
        if markup is None:
            return 0
        return self.processor.get_stats(self.processor.to_markdown(markup))["word_count"]

    def read_chapter(
        self,
        path: str,
        offset: int = 0,
        length: int | None = None,
        markdown: bool = True,
    ) -> ContentWindow:
        """Window over a chapter's Markdown (default) or raw markup."""
        text = self.chapter_markdown(path) if markdown else self.chapter_html(path)
        return window_text(text, offset, length or self.config.window_length)

    def search(self, query: str) -> list[SearchMatch]:
        """Search every chapter for a literal query."""
        chapters = self.chapters()
        texts = {c.path: self.archive.read_text(c.path) for c in chapters}
        return search_chapters(chapters, texts, query, self.config.snippet_window)

    def cover(self) -> tuple[str, bytes] | None:
        """Cover image path and bytes, if the package declares one."""
        path = self.metadata().cover_path
        if path is None:
            return None
        data = self.archive.read_bytes(path)
        if data is None:
            return None
        return path, data
