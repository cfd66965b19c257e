"""
Archive Access
==============

Read-only lookup of EPUB container entries with root-escape protection.
"""

from epubhtml_core.archive.accessor import (
    ArchiveAccessor,
    ArchiveSource,
)

__all__ = [
    "ArchiveAccessor",
    "ArchiveSource",
]
