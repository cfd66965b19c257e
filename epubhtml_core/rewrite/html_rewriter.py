"""
Content Rewriter
================

Re-serializes the body of an EPUB content document as a flat HTML fragment.

Per node the rewriter decides to drop, pass through or transform:

- text is escaped and emitted
- comments, processing instructions and entity nodes are dropped
- elements in the drop list (script, style, head, svg, ...) are dropped
  together with their whole subtree
- ``img`` elements get their ``src`` replaced by a ``data:`` URI built from
  the referenced archive entry and its manifest media type
- every other element is emitted with its attributes, minus the stripped
  ones (``class`` by default), and its children are rewritten in order

Image inlining is best-effort: if the bytes or the manifest entry cannot be
found the element is emitted without any ``src``.
"""

import base64
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple
import logging

import lxml.html
from lxml import etree

from epubhtml_core.archive import ArchiveAccessor
from epubhtml_core.config import RewriteConfig
from epubhtml_core.errors import ArchiveError, ContentParseError, NestingTooDeepError
from epubhtml_core.opf import ManifestIndex
from epubhtml_core.paths import directory_of, resolve
from epubhtml_core.xml import escape_markup, find_first_by_local_name, is_element, local_name, sniff_encoding

logger = logging.getLogger(__name__)

IMAGE_TAG = 'img'
SOURCE_ATTRIBUTE = 'src'
EMPTY_DOCUMENT = "<html><head></head><body></body></html>"


@dataclass
class RewriteStats:
    """Image inlining counters accumulated across documents."""

    images_inlined: int = 0
    images_missing: int = 0
    warnings: List[str] = field(default_factory=list)

    def add_missing(self, message: str) -> None:
        self.images_missing += 1
        self.warnings.append(message)


def parse_content_document(data: bytes, archive_path: str = "") -> Any:
    """
    Parse a content document with the lenient lxml HTML parser.

    Returns the root ``<html>`` element. The parser tolerates malformed and
    partial markup, and blank input yields an empty document. The tree is
    built without libxml2's depth cap so that ``RewriteConfig.max_depth``
    decides how deep a document may nest.

    Raises:
        ContentParseError: If no document tree could be built
    """
    if not data.strip():
        return lxml.html.document_fromstring(EMPTY_DOCUMENT)
    try:
        parser = lxml.html.HTMLParser(
            encoding=sniff_encoding(data),
            remove_comments=False,
            no_network=True,
            huge_tree=True,
        )
        return lxml.html.document_fromstring(data, parser=parser)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError, LookupError) as e:
        raise ContentParseError(f"Could not parse HTML content from {archive_path}: {e}", path=archive_path) from e


class ContentRewriter:
    """
    Rewrites content document trees into sanitized, image-inlined fragments.

    Example:
        rewriter = ContentRewriter(archive, package.build_index())
        root = parse_content_document(archive.read(path), path)
        fragment = rewriter.rewrite(root, path)
    """

    def __init__(self,
                 archive: ArchiveAccessor,
                 index: ManifestIndex,
                 config: Optional[RewriteConfig] = None):
        self.archive = archive
        self.index = index
        self.config = config or RewriteConfig()
        self.stats = RewriteStats()

        self._dropped = frozenset(self.config.dropped_tags)
        self._stripped = frozenset(self.config.stripped_attributes)
        self._self_closing = frozenset(self.config.self_closing_tags)

    def rewrite(self, root: Any, document_path: str) -> str:
        """
        Rewrite the children of the first ``<body>`` under ``root``.

        Args:
            root: Parsed document tree
            document_path: Archive path of the document, used as the base
                for relative image references

        Returns:
            The rewritten fragment; empty if the document has no body

        Raises:
            NestingTooDeepError: If elements nest deeper than ``max_depth``
        """
        body = find_first_by_local_name(root, 'body')
        if body is None:
            logger.info(f"No <body> in {document_path}; nothing to extract")
            return ""

        out: List[str] = []
        try:
            self._render_children(body, out, directory_of(document_path), document_path, 1)
        except RecursionError as e:
            raise NestingTooDeepError(
                f"{document_path} nests elements too deeply to rewrite",
                path=document_path,
            ) from e
        return "".join(out)

    def _render_children(self, element: Any, out: List[str], base_dir: str,
                         document_path: str, depth: int) -> None:
        if element.text:
            out.append(escape_markup(element.text))
        for child in element:
            self._render_node(child, out, base_dir, document_path, depth)
            if child.tail:
                out.append(escape_markup(child.tail))

    def _render_node(self, node: Any, out: List[str], base_dir: str,
                     document_path: str, depth: int) -> None:
        if not is_element(node):
            return

        tag = local_name(node)
        if tag in self._dropped:
            return

        if depth > self.config.max_depth:
            raise NestingTooDeepError(
                f"{document_path} nests elements deeper than {self.config.max_depth}",
                path=document_path,
            )

        attributes = self._attributes(node, tag, base_dir)
        out.append(self._open_tag(tag, attributes))

        self._render_children(node, out, base_dir, document_path, depth + 1)

        has_children = len(node) > 0 or bool(node.text)
        if has_children or tag not in self._self_closing:
            out.append(f"</{tag}>")

    def _attributes(self, node: Any, tag: str, base_dir: str) -> List[Tuple[str, str]]:
        attributes = [
            (name, value) for name, value in node.attrib.items()
            if name not in self._stripped
        ]
        if tag != IMAGE_TAG:
            return attributes

        src = node.get(SOURCE_ATTRIBUTE)
        attributes = [(name, value) for name, value in attributes if name != SOURCE_ATTRIBUTE]
        if src:
            data_uri = self._inline_image(src, base_dir)
            if data_uri is not None:
                attributes.append((SOURCE_ATTRIBUTE, data_uri))
        return attributes

    @staticmethod
    def _open_tag(tag: str, attributes: List[Tuple[str, str]]) -> str:
        parts = [f"<{tag}"]
        for name, value in attributes:
            parts.append(f' {name}="{escape_markup(value)}"')
        parts.append(">")
        return "".join(parts)

    def _inline_image(self, src: str, base_dir: str) -> Optional[str]:
        if src.startswith('data:'):
            return src

        image_path = resolve(base_dir, src)
        try:
            image_data = self.archive.read(image_path)
        except ArchiveError as e:
            message = f"Could not read image file {image_path}: {e}"
            logger.warning(message)
            self.stats.add_missing(message)
            return None

        entry = self.index.entry_for_path(image_path)
        if entry is None:
            message = f"Could not find manifest item for image {image_path}"
            logger.warning(message)
            self.stats.add_missing(message)
            return None

        encoded = base64.b64encode(image_data).decode('ascii')
        self.stats.images_inlined += 1
        logger.debug(f"Inlined {image_path} ({entry.media_type}, {len(image_data)} bytes)")
        return f"data:{entry.media_type};base64,{encoded}"
