"""
Archive Accessor
================

Read-only access to the entries of an EPUB (ZIP) archive by exact path.
"""

import zipfile
import zlib
from pathlib import Path
from typing import BinaryIO, List, Optional, Union
import logging

from epubhtml_core.errors import (
    ArchiveAccessDeniedError,
    ArchiveOpenError,
    ArchiveReadError,
    EntryNotFoundError,
)
from epubhtml_core.paths import normalize, is_escaping

logger = logging.getLogger(__name__)

ArchiveSource = Union[str, Path, BinaryIO]


class ArchiveAccessor:
    """
    Looks up and reads named entries inside an open ZIP archive.

    The accessor owns the underlying ``zipfile.ZipFile`` when created with
    ``open()``; use it as a context manager so the handle is released on
    every exit path.

    Example:
        with ArchiveAccessor.open(Path("book.epub")) as archive:
            data = archive.read("OEBPS/content.opf")
    """

    def __init__(self, zip_file: zipfile.ZipFile, source_name: str = ""):
        self._zip = zip_file
        self.source_name = source_name or (zip_file.filename or "<memory>")

    @classmethod
    def open(cls, source: ArchiveSource) -> "ArchiveAccessor":
        """
        Open an archive from a filesystem path or a binary file object.

        Raises:
            ArchiveOpenError: If the source is missing or not a ZIP archive
        """
        name = str(source) if isinstance(source, (str, Path)) else getattr(source, "name", "<memory>")
        try:
            zip_file = zipfile.ZipFile(source, "r")
        except (OSError, zipfile.BadZipFile) as e:
            raise ArchiveOpenError(f"Failed to open EPUB file {name}: {e}", path=str(name)) from e
        return cls(zip_file, source_name=str(name))

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ArchiveAccessor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def names(self) -> List[str]:
        """Return entry names in archive order."""
        return [info.filename for info in self._zip.infolist()]

    def _find(self, archive_path: str) -> Optional[zipfile.ZipInfo]:
        for info in self._zip.infolist():
            if info.filename == archive_path and not info.is_dir():
                return info
        return None

    def contains(self, archive_path: str) -> bool:
        clean = normalize(archive_path)
        return not is_escaping(clean) and self._find(clean) is not None

    def read(self, archive_path: str) -> bytes:
        """
        Read the full contents of one archive entry.

        Args:
            archive_path: Archive path; it is normalized before lookup

        Returns:
            The entry's bytes

        Raises:
            ArchiveAccessDeniedError: If the path escapes the archive root
            EntryNotFoundError: If no entry has exactly that path
            ArchiveReadError: If the entry is corrupt or encrypted
        """
        clean = normalize(archive_path)
        if is_escaping(clean):
            raise ArchiveAccessDeniedError(
                f"invalid path trying to access parent directory: {archive_path}",
                path=archive_path,
            )

        info = self._find(clean)
        if info is None:
            raise EntryNotFoundError(f"file {clean} not found in archive", path=clean)

        try:
            with self._zip.open(info) as stream:
                return stream.read()
        except (zipfile.BadZipFile, zlib.error, RuntimeError, OSError) as e:
            raise ArchiveReadError(f"failed to read {clean}: {e}", path=clean) from e
