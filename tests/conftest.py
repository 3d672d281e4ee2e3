"""Shared fixtures: small EPUB archives built in memory."""

import io
import zipfile
from pathlib import Path

import pytest


def container_xml(opf_path: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<container version="1.0" '
        'xmlns="urn:oasis:names:tc:opendocument:xmlns:container">\n'
        "  <rootfiles>\n"
        f'    <rootfile full-path="{opf_path}" '
        'media-type="application/oebps-package+xml"/>\n'
        "  </rootfiles>\n"
        "</container>\n"
    )


def build_epub(files: dict[str, str | bytes]) -> bytes:
    """Zip the given entries into an EPUB-shaped archive."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        for name, content in files.items():
            zf.writestr(name, content)
    return buffer.getvalue()


def xhtml(body: str, title: str = "Chapter") -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<html xmlns="http://www.w3.org/1999/xhtml">\n'
        f"<head><title>{title}</title></head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )


NCX_OPF = """<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="2.0" unique-identifier="bookid">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">
    <dc:title>The Fox Book</dc:title>
    <dc:creator>Jane Doe</dc:creator>
    <dc:creator>John Roe</dc:creator>
    <dc:language>en</dc:language>
    <dc:publisher>Example Press</dc:publisher>
    <dc:identifier id="bookid">urn:uuid:1234</dc:identifier>
    <meta name="cover" content="cover-img"/>
  </metadata>
  <manifest>
    <item id="ncx" href="toc.ncx" media-type="application/x-dtbncx+xml"/>
    <item href="c1.html" id="ch1" media-type="application/xhtml+xml"/>
    <item id="ch2" href="c2.html" media-type="application/xhtml+xml"/>
    <item id="cover-img" href="images/cover.png" media-type="image/png"/>
  </manifest>
  <spine toc="ncx">
    <itemref idref="ch1"/>
    <itemref idref="ch2"/>
  </spine>
</package>
"""

NCX = """<?xml version="1.0" encoding="UTF-8"?>
<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1">
  <navMap>
    <navPoint id="n1" playOrder="1">
      <navLabel><text>Chapter One</text></navLabel>
      <content src="c1.html#start"/>
    </navPoint>
    <navPoint id="n2" playOrder="2">
      <navLabel><text>Chapter One, Again</text></navLabel>
      <content src="c1.html#later"/>
    </navPoint>
  </navMap>
</ncx>
"""

CHAPTER_ONE = xhtml(
    "<h1>Chapter One</h1>\n"
    "<p>The quick brown fox jumps over the lazy dog.</p>\n"
    "<p>A second <b>fox</b> appears.</p>"
)
CHAPTER_TWO = xhtml("<p>No animals here, only a <i>quiet</i> field.</p>")
COVER_PNG = b"\x89PNG\r\n\x1a\nfake-cover"


@pytest.fixture
def ncx_book() -> bytes:
    """EPUB 2 book: package at the root, NCX navigation."""
    return build_epub(
        {
            "META-INF/container.xml": container_xml("content.opf"),
            "content.opf": NCX_OPF,
            "toc.ncx": NCX,
            "c1.html": CHAPTER_ONE,
            "c2.html": CHAPTER_TWO,
            "images/cover.png": COVER_PNG,
        }
    )


NAV_OPF = """<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="3.0" unique-identifier="uid">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
    <dc:title>Modern Book</dc:title>
    <dc:identifier id="uid">isbn-42</dc:identifier>
  </metadata>
  <manifest>
    <item id="nav" href="nav.xhtml" media-type="application/xhtml+xml" properties="nav"/>
    <item id="one" href="text/chapter%20one.xhtml" media-type="application/xhtml+xml"/>
    <item id="two" href="text/../text/ch2.xhtml" media-type="application/xhtml+xml"/>
    <item id="three" href="./text/ch3.xhtml" media-type="application/xhtml+xml"/>
    <item id="img" href="images/c.jpg" media-type="image/jpeg" properties="cover-image"/>
  </manifest>
  <spine>
    <itemref idref="one"/>
    <itemref idref="ghost"/>
    <itemref idref="two"/>
    <itemref idref="three"/>
  </spine>
</package>
"""

NAV = """<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml" xmlns:epub="http://www.idpf.org/2007/ops">
<head><title>Contents</title></head>
<body>
  <nav epub:type="toc" id="toc">
    <ol>
      <li><a href="text/chapter%20one.xhtml#s1"><span>First</span> Chapter</a></li>
      <li><a href="text/ch2.xhtml">Second Chapter</a></li>
      <li><a href="text/ch2.xhtml#part2">Second Chapter, Part Two</a></li>
    </ol>
  </nav>
  <nav epub:type="landmarks">
    <ol><li><a href="text/ch3.xhtml">Landmark Only</a></li></ol>
  </nav>
</body>
</html>
"""


@pytest.fixture
def nav_book() -> bytes:
    """EPUB 3 book: package under OEBPS/, navigation document, no NCX.

    The spine references an id the manifest lacks, and chapter three's
    document is missing from the archive.
    """
    return build_epub(
        {
            "META-INF/container.xml": container_xml("OEBPS/content.opf"),
            "OEBPS/content.opf": NAV_OPF,
            "OEBPS/nav.xhtml": NAV,
            "OEBPS/text/chapter one.xhtml": xhtml("<h2>First Chapter</h2><p>Whale ahoy.</p>"),
            "OEBPS/text/ch2.xhtml": xhtml("<p>The whale dives.</p>"),
        }
    )


@pytest.fixture
def write_book(tmp_path: Path):
    """Write EPUB bytes to a temporary .epub file and return its path."""

    def _write(data: bytes, name: str = "book.epub") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
