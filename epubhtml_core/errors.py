"""
Exception Taxonomy
==================

Errors raised by the conversion pipeline. Fatal conditions (the archive
cannot be opened, the package description cannot be found or parsed)
abort a run; everything derived from ``ArchiveError`` or ``ContentError``
is scoped to a single content document or image and is handled by the
orchestrator or the rewriter.
"""


class EpubError(Exception):
    """Base class for all conversion errors."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


# Archive access

class ArchiveError(EpubError):
    """A problem reading from the input archive."""


class ArchiveOpenError(ArchiveError):
    """The input archive could not be opened."""


class EntryNotFoundError(ArchiveError):
    """No archive entry has the requested path."""


class ArchiveAccessDeniedError(ArchiveError):
    """A path resolved to a location above the archive root."""


class ArchiveReadError(ArchiveError):
    """An archive entry exists but its bytes could not be read."""


# Package description

class PackageError(EpubError):
    """A problem locating or parsing the package description."""


class PackageNotFoundError(PackageError):
    """No package description could be located in the archive."""


class PackageParseError(PackageError):
    """The container pointer file or package description is malformed."""


# Content documents

class ContentError(EpubError):
    """A content document could not be turned into an output fragment."""


class ContentParseError(ContentError):
    """A content document could not be parsed as markup."""


class NestingTooDeepError(ContentError):
    """A content document nests elements deeper than the configured limit."""
