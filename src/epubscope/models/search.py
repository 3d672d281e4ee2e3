"""Data models for search results and content windows."""

from pydantic import BaseModel, ConfigDict


class SearchMatch(BaseModel):
    """A query hit in raw markup and, when correlated, in converted text."""

    model_config = ConfigDict(frozen=True)

    chapter_title: str
    chapter_path: str
    occurrence: int
    html_offset: int
    html_snippet: str
    markdown_offset: int | None = None
    markdown_snippet: str | None = None
    correlation_uncertain: bool = False


class ContentWindow(BaseModel):
    """A slice of a text body plus pagination metadata."""

    model_config = ConfigDict(frozen=True)

    slice: str
    offset: int
    length: int
    total_length: int
    has_more: bool
    next_offset: int | None = None
