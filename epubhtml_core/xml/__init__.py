"""
Markup Processing Utilities
===========================

Namespace-agnostic lookups, escaping and encoding detection.
"""

from epubhtml_core.xml.utils import (
    local_name,
    is_element,
    iter_children_by_local_name,
    find_child_by_local_name,
    find_first_by_local_name,
    escape_markup,
    sniff_encoding,
    make_xml_parser,
)

__all__ = [
    "local_name",
    "is_element",
    "iter_children_by_local_name",
    "find_child_by_local_name",
    "find_first_by_local_name",
    "escape_markup",
    "sniff_encoding",
    "make_xml_parser",
]
