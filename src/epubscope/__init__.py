"""EPUB structure, Markdown conversion and cross-representation search."""

from epubscope.core.archive import EpubArchive
from epubscope.core.chapters import build_chapters
from epubscope.core.content_processor import convert_to_plain_text
from epubscope.core.epub_parser import EpubParser
from epubscope.core.search import search_in_book
from epubscope.core.windowing import window_text
from epubscope.errors import EpubscopeError, FormatError, QueryError, RangeError
from epubscope.models import Chapter, ContentWindow, SearchMatch, TOCEntry

__version__ = "0.1.0"

__all__ = [
    "EpubArchive",
    "EpubParser",
    "build_chapters",
    "convert_to_plain_text",
    "window_text",
    "search_in_book",
    "EpubscopeError",
    "FormatError",
    "RangeError",
    "QueryError",
    "Chapter",
    "TOCEntry",
    "ContentWindow",
    "SearchMatch",
]
