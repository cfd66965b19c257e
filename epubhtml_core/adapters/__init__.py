"""
Format Adapters
===============

Format-specific adapters that run the conversion pipeline.

Components:
- BaseAdapter: Abstract base class for format adapters
- AdapterResult: Container for adapter results
- EpubHtmlAdapter: EPUB to single-file HTML
"""

from epubhtml_core.adapters.base import (
    BaseAdapter,
    AdapterResult,
)

from epubhtml_core.adapters.epub_adapter import (
    EpubHtmlAdapter,
)

__all__ = [
    "BaseAdapter",
    "AdapterResult",
    "EpubHtmlAdapter",
]
