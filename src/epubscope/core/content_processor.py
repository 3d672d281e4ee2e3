"""Convert chapter XHTML into Markdown-flavored plain text."""

import re

_FLAGS = re.IGNORECASE | re.DOTALL

_BODY = re.compile(r"<body\b[^>]*>(.*?)</body>", _FLAGS)
_HIDDEN = re.compile(r"<(head|script|style)\b[^>]*>.*?</\1\s*>", _FLAGS)
_HEADINGS = [
    (re.compile(rf"<h{level}\b[^>]*>(.*?)</h{level}\s*>", _FLAGS), "#" * level)
    for level in range(1, 7)
]
_PARAGRAPH = re.compile(r"<p\b[^>]*>(.*?)</p\s*>", _FLAGS)
_BREAK = re.compile(r"<br\b[^>]*>", re.IGNORECASE)
_BOLD = re.compile(r"<(b|strong)\b[^>]*>(.*?)</\1\s*>", _FLAGS)
_ITALIC = re.compile(r"<(i|em)\b[^>]*>(.*?)</\1\s*>", _FLAGS)
_LIST_ITEM = re.compile(r"<li\b[^>]*>(.*?)</li\s*>", _FLAGS)
_LIST = re.compile(r"<(ul|ol)\b[^>]*>(.*?)</\1\s*>", _FLAGS)
_LINK = re.compile(
    r"""<a\b[^>]*?\shref\s*=\s*(["'])([^>]*?)\1[^>]*>(.*?)</a\s*>""", _FLAGS
)

# Attribute-order independent image matching: src before alt, alt before src,
# then src alone
_IMG_SRC_ALT = re.compile(
    r"""<img\b[^>]*?\ssrc\s*=\s*(["'])([^>]*?)\1[^>]*?\salt\s*=\s*(["'])([^>]*?)\3[^>]*>""",
    _FLAGS,
)
_IMG_ALT_SRC = re.compile(
    r"""<img\b[^>]*?\salt\s*=\s*(["'])([^>]*?)\1[^>]*?\ssrc\s*=\s*(["'])([^>]*?)\3[^>]*>""",
    _FLAGS,
)
_IMG_SRC = re.compile(r"""<img\b[^>]*?\ssrc\s*=\s*(["'])([^>]*?)\1[^>]*>""", _FLAGS)

_TAG = re.compile(r"<[^>]+>")

_ENTITIES = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
}
_ENTITY = re.compile("|".join(re.escape(name) for name in _ENTITIES))

_BLANK_RUN = re.compile(r"\n{3,}")


class ContentProcessor:
    """Rule-based XHTML to Markdown conversion.

    The rules run in a fixed order and only know a small tag subset;
    anything else is stripped in the final tag pass with its text kept.
    """

    def to_markdown(self, markup: str | bytes | None) -> str:
        """Convert chapter markup to Markdown. Never fails."""
        if not markup:
            return ""
        if isinstance(markup, bytes):
            markup = markup.decode("utf-8-sig", errors="replace")

        text = markup
        body = _BODY.search(text)
        if body:
            text = body.group(1)

        text = _HIDDEN.sub("", text)

        for pattern, prefix in _HEADINGS:
            text = pattern.sub(lambda m, p=prefix: f"{p} {m.group(1)}\n\n", text)

        text = _PARAGRAPH.sub(r"\1\n\n", text)
        text = _BREAK.sub("\n", text)

        text = _BOLD.sub(r"**\2**", text)
        text = _ITALIC.sub(r"*\2*", text)

        text = _LIST_ITEM.sub(r"* \1\n", text)
        text = _LIST.sub(r"\2\n", text)

        text = _LINK.sub(r"[\3](\2)", text)

        text = _IMG_SRC_ALT.sub(r"![\4](\2)", text)
        text = _IMG_ALT_SRC.sub(r"![\2](\4)", text)
        text = _IMG_SRC.sub(r"![](\2)", text)

        text = _TAG.sub("", text)
        text = _ENTITY.sub(lambda m: _ENTITIES[m.group(0)], text)

        return self._clean_whitespace(text)

    def _clean_whitespace(self, text: str) -> str:
        """Trim every line and collapse runs of blank lines."""
        lines = [line.strip() for line in text.split("\n")]
        return _BLANK_RUN.sub("\n\n", "\n".join(lines)).strip()

    def get_stats(self, content: str) -> dict[str, int]:
        """Calculate content statistics."""
        words = content.split()
        paragraphs = [p for p in content.split("\n\n") if p.strip()]
        return {
            "word_count": len(words),
            "character_count": len(content),
            "paragraph_count": len(paragraphs),
        }


_processor = ContentProcessor()


def convert_to_plain_text(markup: str | bytes | None) -> str:
    """Convert chapter markup to Markdown-flavored plain text."""
    return _processor.to_markdown(markup)
