"""
Output Writers
==============

Writers that wrap converted content in a complete output document.

Components:
- BaseWriter: Abstract base class for writers
- WriteResult: Container for write results
- HtmlDocumentWriter: Single-file HTML output
"""

from epubhtml_core.packaging.base import (
    BaseWriter,
    WriteResult,
)

from epubhtml_core.packaging.html_writer import (
    HtmlDocumentWriter,
    HTML_HEADER,
    HTML_FOOTER,
)

__all__ = [
    "BaseWriter",
    "WriteResult",
    "HtmlDocumentWriter",
    "HTML_HEADER",
    "HTML_FOOTER",
]
