"""
Package Description Parser
==========================

Locates the package description (``.opf``) inside an EPUB archive and
parses it into a ``PackageModel``.

Discovery first consults the container pointer file
(``META-INF/container.xml``). If that file is absent or names no rootfile
with the package media type, the archive entries are scanned for a
package description at the root or under one of the conventional
top-level directories.
"""

from typing import Optional
import logging

from lxml import etree

from epubhtml_core.archive import ArchiveAccessor
from epubhtml_core.config import PackageConfig
from epubhtml_core.errors import (
    EntryNotFoundError,
    PackageNotFoundError,
    PackageParseError,
)
from epubhtml_core.opf.base import ManifestEntry, PackageModel
from epubhtml_core.paths import directory_of, join
from epubhtml_core.xml import (
    find_child_by_local_name,
    iter_children_by_local_name,
    local_name,
    make_xml_parser,
)

logger = logging.getLogger(__name__)


def _parse_xml(data: bytes, archive_path: str, what: str) -> etree._Element:
    try:
        return etree.fromstring(data, make_xml_parser())
    except etree.XMLSyntaxError as e:
        raise PackageParseError(f"failed to parse {what} {archive_path}: {e}", path=archive_path) from e


def read_container(archive: ArchiveAccessor, config: Optional[PackageConfig] = None) -> Optional[str]:
    """
    Return the package description path declared by the container file.

    Returns None when the container file is absent or declares no rootfile
    with the package media type.

    Raises:
        PackageParseError: If the container file is not well-formed XML
    """
    config = config or PackageConfig()
    try:
        data = archive.read(config.container_path)
    except EntryNotFoundError:
        logger.info(f"{config.container_path} not found; scanning archive for a package description")
        return None

    root = _parse_xml(data, config.container_path, "container file")
    if local_name(root) != 'container':
        raise PackageParseError(
            f"{config.container_path} has root <{local_name(root)}>, expected <container>",
            path=config.container_path,
        )

    for rootfiles in iter_children_by_local_name(root, 'rootfiles'):
        for rootfile in iter_children_by_local_name(rootfiles, 'rootfile'):
            if rootfile.get('media-type') != config.package_media_type:
                continue
            full_path = rootfile.get('full-path', '')
            if full_path:
                return full_path
            logger.warning(f"Ignoring rootfile with empty full-path in {config.container_path}")

    logger.info(f"No {config.package_media_type} rootfile in {config.container_path}")
    return None


def scan_for_package(archive: ArchiveAccessor, config: Optional[PackageConfig] = None) -> Optional[str]:
    """Return the first package description at the archive root or in a fallback directory."""
    config = config or PackageConfig()
    for name in archive.names():
        if not name.endswith(config.package_extension):
            continue
        if '/' not in name:
            return name
        if any(name.startswith(prefix) for prefix in config.fallback_dirs):
            return name
    return None


def find_package_path(archive: ArchiveAccessor, config: Optional[PackageConfig] = None) -> str:
    """
    Locate the package description inside the archive.

    Raises:
        PackageNotFoundError: If neither discovery strategy finds a path
        PackageParseError: If the container file is malformed
    """
    config = config or PackageConfig()
    package_path = read_container(archive, config) or scan_for_package(archive, config)
    if not package_path:
        raise PackageNotFoundError(
            f"package description not found in {config.container_path} and no fallback found",
            path=archive.source_name,
        )
    logger.info(f"Found OPF file: {package_path}")
    return package_path


def parse_package(archive: ArchiveAccessor, package_path: str) -> PackageModel:
    """
    Parse the package description at ``package_path``.

    Every manifest href is resolved against the package description's
    directory here, so consumers only ever see archive-absolute paths.

    Raises:
        PackageNotFoundError: If the file is not in the archive
        PackageParseError: If the file is not a well-formed package document
    """
    try:
        data = archive.read(package_path)
    except EntryNotFoundError as e:
        raise PackageNotFoundError(f"OPF file {package_path} not found in archive", path=package_path) from e

    root = _parse_xml(data, package_path, "OPF file")
    if local_name(root) != 'package':
        raise PackageParseError(
            f"OPF file {package_path} has root <{local_name(root)}>, expected <package>",
            path=package_path,
        )

    package_dir = directory_of(package_path)
    model = PackageModel(
        package_path=package_path,
        package_dir=package_dir,
        version=root.get('version', ''),
        unique_identifier=root.get('unique-identifier', ''),
    )

    metadata = find_child_by_local_name(root, 'metadata')
    if metadata is not None:
        title = find_child_by_local_name(metadata, 'title')
        if title is not None:
            text = ''.join(title.itertext()).strip()
            model.title = text or None

    manifest = find_child_by_local_name(root, 'manifest')
    if manifest is not None:
        for item in iter_children_by_local_name(manifest, 'item'):
            item_id = item.get('id', '')
            href = item.get('href', '')
            if not item_id or not href:
                logger.warning(f"Skipping manifest item without id or href in {package_path}")
                continue
            model.manifest.append(ManifestEntry(
                id=item_id,
                resolved_path=join(package_dir, href),
                media_type=item.get('media-type', ''),
                href=href,
            ))

    spine = find_child_by_local_name(root, 'spine')
    if spine is not None:
        model.toc = spine.get('toc', '')
        model.spine = [ref.get('idref', '') for ref in iter_children_by_local_name(spine, 'itemref')]

    if not model.manifest or not model.spine:
        logger.warning(f"Manifest or spine is empty in {package_path}; output will be empty")

    logger.debug(f"Parsed {len(model.manifest)} manifest items and {len(model.spine)} spine items")
    return model
