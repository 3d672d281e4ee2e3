"""Assemble the ordered chapter list of a book."""

import logging
from pathlib import Path

from epubscope.config import NO_HEADING
from epubscope.core.archive import EpubArchive
from epubscope.core.navigation import NavigationMap, resolve_titles
from epubscope.core.package import load_package
from epubscope.models.book import Chapter, PackageDocument

log = logging.getLogger(__name__)


def assemble_chapters(
    document: PackageDocument,
    titles: NavigationMap,
    archive: EpubArchive,
    placeholder: str = NO_HEADING,
) -> list[Chapter]:
    """Join spine, manifest, titles and entry sizes, in spine order."""
    chapters = []
    for idref in document.spine:
        path = document.manifest.get(idref)
        if path is None:
            log.debug("Spine idref %r not in manifest, skipping", idref)
            continue
        if not archive.has_entry(path):
            log.debug("Spine document %s missing from archive", path)
        chapters.append(
            Chapter(
                title=titles.get(path) or placeholder,
                path=path,
                size=archive.entry_size(path),
            )
        )
    return chapters


def build_chapters(
    source: bytes | str | Path | EpubArchive, placeholder: str = NO_HEADING
) -> list[Chapter]:
    """Parse an archive into chapters in reading order.

    Args:
        source: Raw EPUB bytes, a path to an EPUB file, or an open archive
        placeholder: Title for chapters the navigation does not name

    Raises:
        FormatError: If the container or package document is missing
    """
    archive = EpubArchive.open(source)
    document = load_package(archive)
    titles = resolve_titles(document, archive)
    return assemble_chapters(document, titles, archive, placeholder)
