"""Container descriptor and package document parsing."""

import logging
import warnings

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from epubscope.config import CONTAINER_PATH
from epubscope.core.archive import EpubArchive
from epubscope.core.paths import decode_href, normalize_path, package_dir
from epubscope.errors import FormatError
from epubscope.models.book import BookMetadata, PackageDocument

# Suppress XML parsing warnings - EPUB files often use XHTML
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

log = logging.getLogger(__name__)


def _xml(text: str) -> BeautifulSoup:
    return BeautifulSoup(text, "lxml-xml")


def locate_package_document(
    container_text: str | None, container_path: str = CONTAINER_PATH
) -> str:
    """Return the root-file path declared by the container descriptor."""
    if not container_text:
        raise FormatError(f"EPUB missing {container_path}", path=container_path)

    for rootfile in _xml(container_text).find_all("rootfile"):
        full_path = rootfile.get("full-path")
        if full_path:
            return full_path

    raise FormatError(
        f"Could not find root file in {container_path}", path=container_path
    )


def parse_manifest_and_spine(
    opf_text: str, opf_dir: str
) -> tuple[dict[str, str], list[str]]:
    """Return the id -> path manifest and the ordered spine idrefs."""
    document = _parse_package(opf_text, opf_path="", opf_dir=opf_dir)
    return document.manifest, document.spine


def _parse_package(opf_text: str, opf_path: str, opf_dir: str) -> PackageDocument:
    soup = _xml(opf_text)

    manifest: dict[str, str] = {}
    media_types: dict[str, str] = {}
    properties: dict[str, list[str]] = {}

    for item in soup.find_all("item"):
        item_id = item.get("id")
        href = item.get("href")
        if not item_id or not href:
            continue
        # Attribute values are unescaped by the parser; only %-escapes remain
        manifest[item_id] = normalize_path(opf_dir + decode_href(href))
        if item.get("media-type"):
            media_types[item_id] = item["media-type"]
        if item.get("properties"):
            properties[item_id] = item["properties"].split()

    spine_tag = soup.find("spine")
    spine = [
        itemref["idref"]
        for itemref in soup.find_all("itemref")
        if itemref.get("idref")
    ]

    return PackageDocument(
        path=opf_path,
        directory=opf_dir,
        manifest=manifest,
        media_types=media_types,
        properties=properties,
        spine=spine,
        spine_toc=spine_tag.get("toc") if spine_tag else None,
        text=opf_text,
    )


def load_package(
    archive: EpubArchive, container_path: str = CONTAINER_PATH
) -> PackageDocument:
    """Locate and parse the package document of an archive."""
    opf_path = locate_package_document(
        archive.read_text(container_path), container_path
    )
    opf_text = archive.read_text(opf_path)
    if opf_text is None:
        raise FormatError(f"Could not find OPF file at {opf_path}", path=opf_path)

    document = _parse_package(opf_text, opf_path=opf_path, opf_dir=package_dir(opf_path))
    if not document.manifest:
        raise FormatError(
            f"Package document {opf_path} declares no manifest items", path=opf_path
        )

    log.debug(
        "Parsed %s: %d manifest items, %d spine refs",
        opf_path,
        len(document.manifest),
        len(document.spine),
    )
    return document


def parse_metadata(document: PackageDocument) -> BookMetadata:
    """Extract Dublin Core metadata and the cover reference."""
    soup = _xml(document.text)

    def first(name: str) -> str | None:
        tag = soup.find(name)
        if tag is None:
            return None
        return tag.get_text(strip=True) or None

    authors = [
        text
        for text in (tag.get_text(strip=True) for tag in soup.find_all("creator"))
        if text
    ]

    return BookMetadata(
        title=first("title") or "Unknown Title",
        authors=authors,
        language=first("language"),
        publisher=first("publisher"),
        publication_date=first("date"),
        identifier=first("identifier"),
        cover_path=_find_cover(soup, document),
    )


def _find_cover(soup: BeautifulSoup, document: PackageDocument) -> str | None:
    """Resolve the cover image from item properties or the legacy meta tag."""
    item_id = document.find_by_property("cover-image")
    if item_id is None:
        meta = soup.find("meta", attrs={"name": "cover"})
        if meta is not None:
            item_id = meta.get("content")
    if item_id is None:
        return None
    return document.manifest.get(item_id)
