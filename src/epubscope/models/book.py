"""Data models for book structure."""

from pydantic import BaseModel, ConfigDict, Field


class TOCEntry(BaseModel):
    """Single resolved entry of a navigation document."""

    model_config = ConfigDict(frozen=True)

    title: str
    path: str


class Chapter(BaseModel):
    """One spine document in reading order."""

    model_config = ConfigDict(frozen=True)

    title: str
    path: str
    size: int = 0


class BookMetadata(BaseModel):
    """Book-level metadata."""

    model_config = ConfigDict(frozen=True)

    title: str
    authors: list[str] = Field(default_factory=list)
    language: str | None = None
    publisher: str | None = None
    publication_date: str | None = None
    identifier: str | None = None
    cover_path: str | None = None


class PackageDocument(BaseModel):
    """Parsed package document (manifest + spine)."""

    model_config = ConfigDict(frozen=True)

    path: str
    directory: str
    manifest: dict[str, str] = Field(default_factory=dict)
    media_types: dict[str, str] = Field(default_factory=dict)
    properties: dict[str, list[str]] = Field(default_factory=dict)
    spine: list[str] = Field(default_factory=list)
    spine_toc: str | None = None
    text: str = ""

    def find_by_media_type(self, media_type: str) -> str | None:
        """Return the first manifest id declared with ``media_type``."""
        for item_id, declared in self.media_types.items():
            if declared.lower() == media_type:
                return item_id
        return None

    def find_by_property(self, prop: str) -> str | None:
        """Return the first manifest id carrying the ``prop`` property token."""
        for item_id, props in self.properties.items():
            if prop in props:
                return item_id
        return None


class ParsedBook(BaseModel):
    """Complete parsed book structure."""

    model_config = ConfigDict(frozen=True)

    metadata: BookMetadata
    toc: list[TOCEntry] = Field(default_factory=list)
    chapters: list[Chapter]
    spine_order: list[str] = Field(default_factory=list)
