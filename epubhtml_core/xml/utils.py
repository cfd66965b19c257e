"""
Markup Utility Functions
========================

Helpers shared by the package description parser and the content rewriter.
These functions work with lxml elements and provide consistent handling
of namespaces, escaping and encoding detection.
"""

import codecs
import html
import re
from typing import Any, Iterator, Optional
import logging

from lxml import etree

logger = logging.getLogger(__name__)

_XML_DECL_ENCODING = re.compile(rb'^\s*<\?xml[^>]*?encoding\s*=\s*["\']([A-Za-z0-9._:-]+)["\']')
_META_CHARSET = re.compile(rb'<meta[^>]+charset\s*=\s*["\']?([A-Za-z0-9._:-]+)', re.IGNORECASE)

_BOMS = (
    (codecs.BOM_UTF8, 'utf-8'),
    (codecs.BOM_UTF16_LE, 'utf-16'),
    (codecs.BOM_UTF16_BE, 'utf-16'),
)


def local_name(element: Any) -> str:
    """
    Extract local name from element tag, stripping any namespace.

    Comments, processing instructions and entities have no local name.

    Example:
        >>> elem = etree.Element("{http://www.idpf.org/2007/opf}package")
        >>> local_name(elem)
        'package'
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def is_element(node: Any) -> bool:
    """True for real elements, False for comments, PIs and entities."""
    return isinstance(node.tag, str)


def iter_children_by_local_name(element: Any, name: str) -> Iterator[Any]:
    """Yield direct children of ``element`` whose local name is ``name``."""
    for child in element:
        if local_name(child) == name:
            yield child


def find_child_by_local_name(element: Any, name: str) -> Optional[Any]:
    """Return the first direct child with the given local name, or None."""
    return next(iter_children_by_local_name(element, name), None)


def find_first_by_local_name(root: Any, name: str) -> Optional[Any]:
    """Depth-first search for the first element with the given local name."""
    for elem in root.iter():
        if local_name(elem) == name:
            return elem
    return None


def escape_markup(text: str) -> str:
    """Escape ``& < > " '`` for use in text and attribute values."""
    return html.escape(text, quote=True)


def sniff_encoding(data: bytes, default: str = 'utf-8') -> str:
    """
    Guess the character encoding of a markup document.

    Looks at a byte-order mark, then an XML declaration, then a ``<meta>``
    charset in the first kilobytes; falls back to ``default``.
    """
    for bom, name in _BOMS:
        if data.startswith(bom):
            return name

    head = data[:4096]
    match = _XML_DECL_ENCODING.match(head) or _META_CHARSET.search(head)
    if match:
        declared = match.group(1).decode('ascii').lower()
        try:
            codecs.lookup(declared)
            return declared
        except LookupError:
            logger.debug(f"Ignoring unknown declared encoding {declared!r}")
    return default


def make_xml_parser() -> etree.XMLParser:
    """Strict XML parser for package metadata files; no network, no entities."""
    return etree.XMLParser(
        recover=False,
        remove_blank_text=True,
        resolve_entities=False,
        no_network=True,
    )
