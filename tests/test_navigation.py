"""Tests for NCX and navigation document title resolution."""

from conftest import NAV, NCX, NCX_OPF, build_epub, container_xml
from epubscope.core.archive import EpubArchive
from epubscope.core.navigation import parse_nav, parse_ncx, resolve_titles, table_of_contents
from epubscope.core.package import load_package


def _load(data: bytes):
    archive = EpubArchive(data)
    return load_package(archive), archive


class TestParseNcx:
    """Tests for NCX navPoint extraction."""

    def test_pairs_in_order(self) -> None:
        pairs = parse_ncx(NCX, "")
        assert pairs == [
            ("Chapter One", "c1.html"),
            ("Chapter One, Again", "c1.html"),
        ]

    def test_nested_nav_points(self) -> None:
        ncx = """<ncx><navMap>
          <navPoint id="a"><navLabel><text> Part I </text></navLabel>
            <content src="Text/part1.xhtml"/>
            <navPoint id="b"><navLabel><text>Chapter 1</text></navLabel>
              <content src="Text/ch1.xhtml#c1"/></navPoint>
          </navPoint>
        </navMap></ncx>"""

        assert parse_ncx(ncx, "OEBPS/") == [
            ("Part I", "OEBPS/Text/part1.xhtml"),
            ("Chapter 1", "OEBPS/Text/ch1.xhtml"),
        ]


class TestParseNav:
    """Tests for EPUB 3 navigation documents."""

    def test_toc_region_preferred(self) -> None:
        """Landmark links outside the toc nav are ignored."""
        pairs = parse_nav(NAV, "OEBPS/")
        assert pairs == [
            ("First Chapter", "OEBPS/text/chapter one.xhtml"),
            ("Second Chapter", "OEBPS/text/ch2.xhtml"),
            ("Second Chapter, Part Two", "OEBPS/text/ch2.xhtml"),
        ]

    def test_all_anchors_without_toc_region(self) -> None:
        nav = (
            "<html><body><ol>"
            '<li><a href="a.xhtml"><b>Alpha</b></a></li>'
            '<li><a href="#local">Skip</a></li>'
            '<li><a href="b.xhtml#x">Beta</a></li>'
            "</ol></body></html>"
        )
        assert parse_nav(nav, "") == [("Alpha", "a.xhtml"), ("Beta", "b.xhtml")]


class TestResolveTitles:
    """Tests for the path -> title map."""

    def test_first_title_wins(self, ncx_book: bytes) -> None:
        titles = resolve_titles(*_load(ncx_book))
        assert titles == {"c1.html": "Chapter One"}

    def test_nav_document(self, nav_book: bytes) -> None:
        titles = resolve_titles(*_load(nav_book))
        assert titles == {
            "OEBPS/text/chapter one.xhtml": "First Chapter",
            "OEBPS/text/ch2.xhtml": "Second Chapter",
        }

    def test_falls_back_to_nav_when_ncx_empty(self) -> None:
        opf = NCX_OPF.replace(
            '<item id="ch2" href="c2.html"',
            '<item id="nav" href="nav.xhtml" properties="nav"/>\n'
            '    <item id="ch2" href="c2.html"',
        )
        data = build_epub(
            {
                "META-INF/container.xml": container_xml("content.opf"),
                "content.opf": opf,
                "toc.ncx": "<ncx><navMap/></ncx>",
                "nav.xhtml": '<html><body><nav><a href="c2.html">Two</a></nav></body></html>',
            }
        )
        assert resolve_titles(*_load(data)) == {"c2.html": "Two"}

    def test_no_navigation_is_empty(self) -> None:
        opf = "<package><manifest><item id='a' href='a.xhtml'/></manifest><spine/></package>"
        data = build_epub(
            {"META-INF/container.xml": container_xml("content.opf"), "content.opf": opf}
        )
        document, archive = _load(data)

        assert resolve_titles(document, archive) == {}
        assert table_of_contents(document, archive) == []

    def test_declared_ncx_missing_from_archive(self) -> None:
        data = build_epub(
            {"META-INF/container.xml": container_xml("content.opf"), "content.opf": NCX_OPF}
        )
        assert resolve_titles(*_load(data)) == {}


class TestTableOfContents:
    """Tests for the ordered TOC."""

    def test_deduplicated_in_order(self, nav_book: bytes) -> None:
        toc = table_of_contents(*_load(nav_book))
        assert [(e.title, e.path) for e in toc] == [
            ("First Chapter", "OEBPS/text/chapter one.xhtml"),
            ("Second Chapter", "OEBPS/text/ch2.xhtml"),
        ]
