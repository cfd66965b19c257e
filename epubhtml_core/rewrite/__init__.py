"""
Content Rewriting
=================

Body extraction, sanitization and image inlining for content documents.
"""

from epubhtml_core.rewrite.html_rewriter import (
    ContentRewriter,
    RewriteStats,
    parse_content_document,
)

__all__ = [
    "ContentRewriter",
    "RewriteStats",
    "parse_content_document",
]
