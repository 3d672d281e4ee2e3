"""Offset/length windows over long text bodies."""

from epubscope.config import WINDOW_LENGTH
from epubscope.errors import RangeError
from epubscope.models.search import ContentWindow


def window_text(text: str, offset: int = 0, length: int = WINDOW_LENGTH) -> ContentWindow:
    """Return ``text[offset:offset + length]`` with pagination metadata.

    Raises:
        RangeError: If ``offset`` is negative, or at/after the end of a
            non-empty text
        ValueError: If ``length`` is not positive
    """
    if length < 1:
        raise ValueError(f"Window length must be positive, got {length}")
    total = len(text)
    if offset < 0 or (total > 0 and offset >= total):
        raise RangeError(offset, total)

    chunk = text[offset : offset + length]
    end = offset + len(chunk)
    has_more = end < total
    return ContentWindow(
        slice=chunk,
        offset=offset,
        length=len(chunk),
        total_length=total,
        has_more=has_more,
        next_offset=end if has_more else None,
    )


def section_info(window: ContentWindow) -> str:
    """Human-readable pagination footer for a window."""
    lines = [
        "--- Section Info ---",
        f"Offset: {window.offset}",
        f"Returned Length: {window.length}",
        f"Total Chapter Length: {window.total_length}",
    ]
    if window.has_more:
        lines.append(f"Next Offset: {window.next_offset}")
        lines.append(
            "More content available. To see the rest, request again with "
            f"offset={window.next_offset}."
        )
    else:
        lines.append("End of chapter.")
    return "\n".join(lines)
