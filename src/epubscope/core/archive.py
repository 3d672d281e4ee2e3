"""Read-only access to the entries of an EPUB zip archive."""

import io
import logging
import zipfile
from pathlib import Path

from epubscope.errors import FormatError

log = logging.getLogger(__name__)


class EpubArchive:
    """Zip-backed archive accessor.

    Entry names are archive-internal, ``/``-separated and case-sensitive.
    """

    def __init__(self, data: bytes):
        try:
            self._zip = zipfile.ZipFile(io.BytesIO(data))
        except zipfile.BadZipFile as e:
            raise FormatError(f"Not a readable EPUB archive: {e}") from e

    @classmethod
    def from_path(cls, path: Path | str) -> "EpubArchive":
        """Open an archive stored on disk."""
        return cls(Path(path).read_bytes())

    @classmethod
    def open(cls, source: "bytes | str | Path | EpubArchive") -> "EpubArchive":
        """Return an archive for raw bytes, a filesystem path or an archive."""
        if isinstance(source, EpubArchive):
            return source
        if isinstance(source, (bytes, bytearray, memoryview)):
            return cls(bytes(source))
        return cls.from_path(source)

    def list_entries(self) -> list[str]:
        """List entry names in archive order."""
        return self._zip.namelist()

    def has_entry(self, path: str) -> bool:
        return self._info(path) is not None

    def entry_size(self, path: str) -> int:
        """Uncompressed size of an entry, 0 when it is missing."""
        info = self._info(path)
        return info.file_size if info else 0

    def read_bytes(self, path: str) -> bytes | None:
        """Raw bytes of an entry, or None when it is missing."""
        info = self._info(path)
        if info is None:
            log.debug("Archive entry not found: %s", path)
            return None
        return self._zip.read(info)

    def read_text(self, path: str) -> str | None:
        """Entry decoded as UTF-8, or None when it is missing."""
        data = self.read_bytes(path)
        if data is None:
            return None
        return data.decode("utf-8-sig", errors="replace")

    def require_text(self, path: str) -> str:
        """Like read_text, but a missing entry is a FormatError."""
        text = self.read_text(path)
        if text is None:
            raise FormatError(f"File {path} not found in EPUB", path=path)
        return text

    def require_bytes(self, path: str) -> bytes:
        data = self.read_bytes(path)
        if data is None:
            raise FormatError(f"File {path} not found in EPUB", path=path)
        return data

    def _info(self, path: str) -> zipfile.ZipInfo | None:
        try:
            return self._zip.getinfo(path)
        except KeyError:
            return None
