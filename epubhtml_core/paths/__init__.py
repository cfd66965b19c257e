"""
Path Resolution
===============

Forward-slash path algebra for locations inside an EPUB archive.
"""

from epubhtml_core.paths.resolver import (
    normalize,
    join,
    directory_of,
    resolve,
    is_escaping,
)

__all__ = [
    "normalize",
    "join",
    "directory_of",
    "resolve",
    "is_escaping",
]
