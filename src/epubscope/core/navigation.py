"""Chapter titles from NCX (EPUB 2) or navigation documents (EPUB 3)."""

import logging

from bs4 import BeautifulSoup, Tag

from epubscope.core.archive import EpubArchive
from epubscope.core.paths import package_dir, resolve_href, strip_fragment
from epubscope.models.book import PackageDocument, TOCEntry

log = logging.getLogger(__name__)

NCX_MEDIA_TYPE = "application/x-dtbncx+xml"

NavigationMap = dict[str, str]


def table_of_contents(document: PackageDocument, archive: EpubArchive) -> list[TOCEntry]:
    """Ordered navigation entries, one per target path.

    The NCX is tried first; the EPUB 3 navigation document only when the
    NCX yields nothing.
    """
    entries = _ncx_entries(document, archive)
    if not entries:
        log.debug("No NCX entries found, trying navigation document")
        entries = _nav_entries(document, archive)
    if not entries:
        log.debug("No navigation entries found in %s", document.path)
    return entries


def resolve_titles(document: PackageDocument, archive: EpubArchive) -> NavigationMap:
    """Map chapter paths to titles; the first label for a path wins."""
    titles: NavigationMap = {}
    for entry in table_of_contents(document, archive):
        if entry.path not in titles:
            titles[entry.path] = entry.title
    return titles


def _dedupe(pairs: list[tuple[str, str]]) -> list[TOCEntry]:
    """Keep the first (title, path) pair seen for every path."""
    seen: set[str] = set()
    entries = []
    for title, path in pairs:
        if path in seen:
            continue
        seen.add(path)
        entries.append(TOCEntry(title=title, path=path))
    return entries


def _ncx_entries(document: PackageDocument, archive: EpubArchive) -> list[TOCEntry]:
    ncx_id = document.spine_toc if document.spine_toc in document.manifest else None
    if ncx_id is None:
        ncx_id = document.find_by_media_type(NCX_MEDIA_TYPE)
    if ncx_id is None:
        return []

    ncx_path = document.manifest[ncx_id]
    ncx_text = archive.read_text(ncx_path)
    if ncx_text is None:
        log.debug("NCX %s declared but missing from archive", ncx_path)
        return []

    return _dedupe(parse_ncx(ncx_text, package_dir(ncx_path)))


def parse_ncx(ncx_text: str, base_dir: str) -> list[tuple[str, str]]:
    """Extract (label, path) pairs from navPoints in document order."""
    soup = BeautifulSoup(ncx_text, "lxml-xml")
    pairs = []

    for nav_point in soup.find_all("navPoint"):
        label_tag = nav_point.find("navLabel", recursive=False)
        content = nav_point.find("content", recursive=False)
        if label_tag is None or content is None or not content.get("src"):
            continue
        text_tag = label_tag.find("text")
        label = text_tag.get_text().strip() if text_tag else ""
        pairs.append((label, resolve_href(base_dir, content["src"])))

    return pairs


def _nav_entries(document: PackageDocument, archive: EpubArchive) -> list[TOCEntry]:
    nav_id = document.find_by_property("nav")
    if nav_id is None:
        return []

    nav_path = document.manifest[nav_id]
    nav_text = archive.read_text(nav_path)
    if nav_text is None:
        log.debug("Navigation document %s declared but missing", nav_path)
        return []

    # Hrefs in the navigation document are relative to the document itself
    return _dedupe(parse_nav(nav_text, package_dir(nav_path)))


def parse_nav(nav_text: str, base_dir: str) -> list[tuple[str, str]]:
    """Extract (link text, path) pairs from a navigation document.

    Anchors inside the ``toc`` nav region are preferred; without one, every
    anchor in the document is used.
    """
    soup = BeautifulSoup(nav_text, "lxml")
    scope: Tag = soup
    for nav in soup.find_all("nav"):
        if "toc" in (nav.get("epub:type") or "").split():
            scope = nav
            break

    pairs = []
    for anchor in scope.find_all("a", href=True):
        if not strip_fragment(anchor["href"]):
            continue
        label = " ".join(anchor.get_text().split())
        pairs.append((label, resolve_href(base_dir, anchor["href"])))
    return pairs
