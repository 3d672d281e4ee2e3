"""Exception types raised by epubscope."""


class EpubscopeError(Exception):
    """Base class for all epubscope errors."""


class FormatError(EpubscopeError, ValueError):
    """A descriptor, package document or referenced file is missing or unreadable."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class RangeError(EpubscopeError, IndexError):
    """A content window was requested past the end of the text."""

    def __init__(self, offset: int, total_length: int):
        super().__init__(
            f"Offset {offset} is beyond the end of the content "
            f"(total length: {total_length})."
        )
        self.offset = offset
        self.total_length = total_length


class QueryError(EpubscopeError, ValueError):
    """A search query is empty or is not a plain literal string."""
