"""
Package Description
===================

Discovery and parsing of the EPUB package description (manifest + spine).
"""

from epubhtml_core.opf.base import (
    ManifestEntry,
    ManifestIndex,
    PackageModel,
)

from epubhtml_core.opf.parser import (
    find_package_path,
    parse_package,
    read_container,
    scan_for_package,
)

__all__ = [
    "ManifestEntry",
    "ManifestIndex",
    "PackageModel",
    "find_package_path",
    "parse_package",
    "read_container",
    "scan_for_package",
]
