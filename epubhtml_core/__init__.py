"""
EPUB to HTML Core Library
=========================

Flattens an EPUB into one HTML document with images inlined as data URIs.

Architecture
------------

    epubhtml_core/
    ├── paths/      - Forward-slash archive path algebra
    ├── archive/    - Read-only archive entry access
    ├── opf/        - Package description discovery and parsing
    ├── xml/        - Markup helpers (local names, escaping, encodings)
    ├── rewrite/    - Content document body rewriting
    ├── adapters/   - Pipeline orchestration
    ├── packaging/  - Output document writers
    └── config/     - Configuration management

Usage
-----

    from epubhtml_core import EpubHtmlAdapter

    adapter = EpubHtmlAdapter()
    result = adapter.convert(Path("book.epub"), Path("book.html"))
    print(result.summary())
"""

__version__ = "1.0.0"

from epubhtml_core.errors import (
    EpubError,
    ArchiveError,
    ArchiveOpenError,
    EntryNotFoundError,
    ArchiveAccessDeniedError,
    ArchiveReadError,
    PackageError,
    PackageNotFoundError,
    PackageParseError,
    ContentError,
    ContentParseError,
    NestingTooDeepError,
)

from epubhtml_core.archive import ArchiveAccessor

from epubhtml_core.opf import (
    ManifestEntry,
    ManifestIndex,
    PackageModel,
    find_package_path,
    parse_package,
)

from epubhtml_core.rewrite import (
    ContentRewriter,
    parse_content_document,
)

from epubhtml_core.adapters import (
    AdapterResult,
    EpubHtmlAdapter,
)

from epubhtml_core.packaging import HtmlDocumentWriter

from epubhtml_core.config import (
    ConverterConfig,
    load_config,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "EpubError",
    "ArchiveError",
    "ArchiveOpenError",
    "EntryNotFoundError",
    "ArchiveAccessDeniedError",
    "ArchiveReadError",
    "PackageError",
    "PackageNotFoundError",
    "PackageParseError",
    "ContentError",
    "ContentParseError",
    "NestingTooDeepError",
    # Archive
    "ArchiveAccessor",
    # Package
    "ManifestEntry",
    "ManifestIndex",
    "PackageModel",
    "find_package_path",
    "parse_package",
    # Rewrite
    "ContentRewriter",
    "parse_content_document",
    # Pipeline
    "AdapterResult",
    "EpubHtmlAdapter",
    "HtmlDocumentWriter",
    # Config
    "ConverterConfig",
    "load_config",
]
