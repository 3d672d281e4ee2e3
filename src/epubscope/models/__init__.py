"""Data models."""

from epubscope.models.book import (
    BookMetadata,
    Chapter,
    PackageDocument,
    ParsedBook,
    TOCEntry,
)
from epubscope.models.search import ContentWindow, SearchMatch

__all__ = [
    # Book models
    "TOCEntry",
    "Chapter",
    "BookMetadata",
    "PackageDocument",
    "ParsedBook",
    # Reading models
    "SearchMatch",
    "ContentWindow",
]
