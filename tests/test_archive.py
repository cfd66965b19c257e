"""
Tests for the archive accessor.

Run with: pytest tests/test_archive.py -v
"""

import io
import zipfile

import pytest

from epubhtml_core.archive import ArchiveAccessor
from epubhtml_core.errors import (
    ArchiveAccessDeniedError,
    ArchiveOpenError,
    EntryNotFoundError,
)

from conftest import build_zip


@pytest.fixture
def archive():
    buffer = build_zip({
        "OEBPS/content.opf": "<package/>",
        "OEBPS/images/a.jpg": b"\x01\x02",
    })
    with ArchiveAccessor.open(buffer) as accessor:
        yield accessor


class TestOpen:
    """Tests for opening archives."""

    def test_missing_file(self, tmp_path):
        """A missing input file is an ArchiveOpenError naming the path."""
        missing = tmp_path / "missing.epub"
        with pytest.raises(ArchiveOpenError) as excinfo:
            ArchiveAccessor.open(missing)
        assert str(missing) in str(excinfo.value)

    def test_not_a_zip(self, tmp_path):
        """A file that is not a ZIP archive cannot be opened."""
        bogus = tmp_path / "bogus.epub"
        bogus.write_bytes(b"not a zip")
        with pytest.raises(ArchiveOpenError):
            ArchiveAccessor.open(bogus)

    def test_context_manager_closes(self):
        """Leaving the with-block closes the underlying ZIP handle."""
        buffer = build_zip({"a.txt": "x"})
        with ArchiveAccessor.open(buffer) as accessor:
            assert accessor.read("a.txt") == b"x"
        with pytest.raises(ValueError):
            accessor.read("a.txt")

    def test_open_from_path(self, tmp_path):
        """Archives can be opened from a filesystem path."""
        path = tmp_path / "book.epub"
        path.write_bytes(build_zip({"a.txt": "hello"}).getvalue())
        with ArchiveAccessor.open(path) as accessor:
            assert accessor.read("a.txt") == b"hello"
            assert accessor.source_name == str(path)


class TestRead:
    """Tests for ArchiveAccessor.read()."""

    def test_exact_path(self, archive):
        assert archive.read("OEBPS/images/a.jpg") == b"\x01\x02"

    def test_path_is_normalized(self, archive):
        """Lookups normalize dots and backslashes first."""
        assert archive.read("OEBPS\\text\\..\\images\\a.jpg") == b"\x01\x02"

    def test_not_found(self, archive):
        with pytest.raises(EntryNotFoundError) as excinfo:
            archive.read("OEBPS/images/b.jpg")
        assert excinfo.value.path == "OEBPS/images/b.jpg"

    def test_lookup_is_case_sensitive(self, archive):
        with pytest.raises(EntryNotFoundError):
            archive.read("oebps/images/a.jpg")

    @pytest.mark.parametrize("path", ["../a.jpg", "OEBPS/../../a.jpg", ".."])
    def test_escape_is_denied(self, archive, path):
        """Paths that climb above the archive root are rejected."""
        with pytest.raises(ArchiveAccessDeniedError):
            archive.read(path)

    def test_directory_entry_is_not_a_file(self):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as zf:
            zf.writestr("OEBPS/", "")
        buffer.seek(0)
        with ArchiveAccessor.open(buffer) as accessor:
            with pytest.raises(EntryNotFoundError):
                accessor.read("OEBPS/")

    def test_names_in_archive_order(self, archive):
        assert archive.names() == ["mimetype", "OEBPS/content.opf", "OEBPS/images/a.jpg"]

    def test_contains(self, archive):
        assert archive.contains("OEBPS/content.opf")
        assert not archive.contains("OEBPS/missing.opf")
        assert not archive.contains("../OEBPS/content.opf")
