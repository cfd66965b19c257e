"""
HTML Document Writer
====================

Wraps the flattened chapter content in a minimal HTML5 document.
"""

import logging

from epubhtml_core.packaging.base import BaseWriter
from epubhtml_core.xml import escape_markup

logger = logging.getLogger(__name__)

HTML_HEADER = "<!DOCTYPE html>\n<html>\n<head>\n<title>{title}</title>\n</head>\n<body>\n"
HTML_FOOTER = "</body>\n</html>\n"


class HtmlDocumentWriter(BaseWriter):
    """
    Writes a single HTML document: header with the escaped title, the
    chapter content as-is, then the footer.
    """

    def render(self, title: str, content: str) -> str:
        return HTML_HEADER.format(title=escape_markup(title)) + content + HTML_FOOTER

    @property
    def output_format(self) -> str:
        return "HTML"
