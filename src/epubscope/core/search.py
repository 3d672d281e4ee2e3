"""Literal text search across a book's chapters.

Hits are found in the raw chapter markup. Each hit is then correlated with
the converted Markdown text by ordinal rank: the n-th raw occurrence maps to
the n-th converted occurrence, when there is one.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Iterable, Mapping

from epubscope.config import NO_HEADING, SNIPPET_WINDOW
from epubscope.core.archive import EpubArchive
from epubscope.core.chapters import build_chapters
from epubscope.core.content_processor import convert_to_plain_text
from epubscope.errors import QueryError
from epubscope.models.book import Chapter
from epubscope.models.search import SearchMatch

log = logging.getLogger(__name__)

_OPERATORS = re.compile(r"\s+AND\s+|\s+OR\s+|\s+NOT\s+|[()\"]")


def validate_literal_query(query: str) -> str:
    """Return the trimmed query, rejecting boolean-looking expressions."""
    query = query.strip()
    if not query:
        raise QueryError("Query is required")
    if _OPERATORS.search(query):
        raise QueryError(
            "Search only supports simple literal text matching. It does not "
            "support boolean operators (AND, OR, NOT), parentheses, or quotes. "
            "Search for one plain term at a time, e.g. 'patient' or 'table'."
        )
    return query


def find_occurrences(text: str, query: str) -> list[int]:
    """Offsets of case-insensitive, non-overlapping occurrences of ``query``."""
    if not query:
        raise QueryError("Query is required")
    haystack = text.lower()
    needle = query.lower()
    offsets = []
    index = haystack.find(needle)
    while index != -1:
        offsets.append(index)
        index = haystack.find(needle, index + len(needle))
    return offsets


def snippet(text: str, offset: int, query_length: int, window: int) -> str:
    """Context around a hit, clamped to the text bounds."""
    start = max(0, offset - window)
    end = min(len(text), offset + query_length + window)
    return text[start:end]


def search_chapter(
    chapter: Chapter,
    raw_text: str,
    query: str,
    snippet_window: int = SNIPPET_WINDOW,
    converter: Callable[[str], str] = convert_to_plain_text,
) -> list[SearchMatch]:
    """Search one chapter's markup and correlate hits with its converted text."""
    raw_hits = find_occurrences(raw_text, query)
    if not raw_hits:
        return []

    markdown = converter(raw_text)
    md_hits = find_occurrences(markdown, query)
    uncertain = len(md_hits) != len(raw_hits)
    if uncertain:
        log.debug(
            "%s: %d raw hits but %d converted hits for %r",
            chapter.path,
            len(raw_hits),
            len(md_hits),
            query,
        )

    matches = []
    for rank, offset in enumerate(raw_hits, start=1):
        md_offset = md_hits[rank - 1] if rank <= len(md_hits) else None
        matches.append(
            SearchMatch(
                chapter_title=chapter.title,
                chapter_path=chapter.path,
                occurrence=rank,
                html_offset=offset,
                html_snippet=snippet(raw_text, offset, len(query), snippet_window),
                markdown_offset=md_offset,
                markdown_snippet=(
                    snippet(markdown, md_offset, len(query), snippet_window)
                    if md_offset is not None
                    else None
                ),
                correlation_uncertain=uncertain,
            )
        )
    return matches


def search_chapters(
    chapters: Iterable[Chapter],
    raw_text_by_chapter: Mapping[str, str | None],
    query: str,
    snippet_window: int = SNIPPET_WINDOW,
) -> list[SearchMatch]:
    """Search chapters in reading order.

    ``raw_text_by_chapter`` maps chapter paths to markup; chapters without
    text are skipped.
    """
    if not query:
        raise QueryError("Query is required")

    results = []
    for chapter in chapters:
        raw_text = raw_text_by_chapter.get(chapter.path)
        if raw_text is None:
            log.debug("No text for %s, skipping", chapter.path)
            continue
        results.extend(search_chapter(chapter, raw_text, query, snippet_window))
    return results


def search_in_book(
    source: bytes | str | Path | EpubArchive,
    query: str,
    snippet_window: int = SNIPPET_WINDOW,
    placeholder: str = NO_HEADING,
) -> list[SearchMatch]:
    """Search every chapter of an archive for a literal query."""
    archive = EpubArchive.open(source)
    chapters = build_chapters(archive, placeholder)
    texts = {chapter.path: archive.read_text(chapter.path) for chapter in chapters}
    return search_chapters(chapters, texts, query, snippet_window)
