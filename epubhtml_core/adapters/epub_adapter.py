"""
EPUB to HTML Adapter
====================

Runs the conversion pipeline for one EPUB:

    open archive -> find package description -> parse manifest/spine
    -> for each spine item: read, parse, rewrite, append separator
    -> write the combined document

Failures to open the archive or to find/parse the package description are
fatal and propagate as ``EpubError`` subclasses. Failures tied to a single
spine item are logged, recorded as warnings and only skip that item.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from epubhtml_core.adapters.base import AdapterResult, BaseAdapter
from epubhtml_core.archive import ArchiveAccessor, ArchiveSource
from epubhtml_core.config import ConverterConfig
from epubhtml_core.errors import ArchiveError, ContentError
from epubhtml_core.opf import PackageModel, find_package_path, parse_package
from epubhtml_core.packaging import BaseWriter, HtmlDocumentWriter
from epubhtml_core.rewrite import ContentRewriter, parse_content_document

logger = logging.getLogger(__name__)


class EpubHtmlAdapter(BaseAdapter):
    """
    Converts an EPUB into one flat HTML document with inlined images.

    Example:
        adapter = EpubHtmlAdapter()
        result = adapter.convert(Path("book.epub"), Path("book.html"))
        print(result.summary())
    """

    def __init__(self,
                 config: Optional[ConverterConfig] = None,
                 writer: Optional[BaseWriter] = None):
        self.config = config or ConverterConfig()
        self.writer = writer or HtmlDocumentWriter(encoding=self.config.output.encoding)

    @property
    def supported_formats(self) -> List[str]:
        return ['.epub']

    def load_package(self, archive: ArchiveAccessor) -> PackageModel:
        """Discover and parse the package description of an open archive."""
        package_path = find_package_path(archive, self.config.package)
        return parse_package(archive, package_path)

    def process_content(self,
                        package: PackageModel,
                        archive: ArchiveAccessor,
                        result: Optional[AdapterResult] = None) -> str:
        """
        Rewrite every spine item in order and return the concatenation.

        Each successfully parsed item contributes its fragment followed by
        the configured separator. Items that cannot be resolved, read or
        parsed are skipped and recorded on ``result``.
        """
        result = result if result is not None else AdapterResult()
        index = package.build_index()
        rewriter = ContentRewriter(archive, index, self.config.rewrite)
        separator = self.config.rewrite.separator
        parts: List[str] = []

        for idref in package.spine:
            content_path = index.path_for_id(idref)
            if content_path is None:
                self._skip(result, f"Could not find item with id {idref} in manifest")
                continue

            logger.info(f"Processing content file: {content_path}")
            try:
                data = archive.read(content_path)
            except ArchiveError as e:
                self._skip(result, f"Could not read content file {content_path}: {e}")
                continue

            try:
                root = parse_content_document(data, content_path)
                fragment = rewriter.rewrite(root, content_path)
            except ContentError as e:
                self._skip(result, f"Could not process content file {content_path}: {e}")
                continue

            parts.append(fragment)
            parts.append(separator)
            result.chapters_extracted += 1

        result.images_extracted += rewriter.stats.images_inlined
        result.images_missing += rewriter.stats.images_missing
        result.warnings.extend(rewriter.stats.warnings)
        return "".join(parts)

    @staticmethod
    def _skip(result: AdapterResult, message: str) -> None:
        logger.warning(message)
        result.add_warning(message)
        result.chapters_skipped += 1

    def extract(self, source: ArchiveSource) -> AdapterResult:
        """
        Produce the combined chapter content without writing anything.

        Raises:
            ArchiveOpenError: If the archive cannot be opened
            PackageError: If the package description is missing or malformed
        """
        result = AdapterResult()
        with ArchiveAccessor.open(source) as archive:
            package = self.load_package(archive)
            result.title = package.title_or(self.config.package.default_title)
            result.metadata.update(self._package_metadata(package))
            result.content = self.process_content(package, archive, result)
        return result

    def convert(self,
                input_path: Path,
                output_path: Optional[Path] = None,
                **kwargs) -> AdapterResult:
        """
        Convert ``input_path`` and write the HTML document to ``output_path``.

        Raises:
            EpubError: On any fatal conversion failure
            OSError: If the output document cannot be written
        """
        if output_path is None:
            output_path = Path(self.config.output.default_output)

        result = self.extract(input_path)
        written = self.writer.write(output_path, result.title, result.content)
        result.output_path = written.output_path
        result.metadata['bytes_written'] = written.bytes_written
        logger.info(f"Successfully converted EPUB to raw HTML: {output_path}")
        return result

    def extract_metadata(self, input_path: Path) -> Dict[str, Any]:
        with ArchiveAccessor.open(input_path) as archive:
            package = self.load_package(archive)
        metadata = self._package_metadata(package)
        metadata['title'] = package.title_or(self.config.package.default_title)
        return metadata

    @staticmethod
    def _package_metadata(package: PackageModel) -> Dict[str, Any]:
        return {
            'package_path': package.package_path,
            'version': package.version,
            'unique_identifier': package.unique_identifier,
            'toc': package.toc,
            'manifest_items': len(package.manifest),
            'spine_items': len(package.spine),
        }
