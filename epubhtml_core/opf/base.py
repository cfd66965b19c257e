"""
Package Model
=============

Data classes describing a parsed package description: the manifest of
resources, the spine (reading order) and the lookup index derived from the
manifest.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManifestEntry:
    """
    One manifest resource.

    ``resolved_path`` is archive-absolute: it was joined with the package
    description's directory at parse time and is never re-resolved.
    """

    id: str
    resolved_path: str
    media_type: str
    href: str = ""           # Href as declared in the package description


@dataclass
class PackageModel:
    """
    Parsed package description.

    Attributes:
        package_path: Archive path of the package description
        package_dir: Directory used to resolve manifest hrefs
        title: Book title, or None if the metadata declares none
        manifest: Manifest entries in declaration order
        spine: Manifest ids in reading order (duplicates preserved)
        version: Package ``version`` attribute
        unique_identifier: Package ``unique-identifier`` attribute
        toc: Spine ``toc`` attribute
    """
    package_path: str
    package_dir: str
    title: Optional[str] = None
    manifest: List[ManifestEntry] = field(default_factory=list)
    spine: List[str] = field(default_factory=list)
    version: str = ""
    unique_identifier: str = ""
    toc: str = ""

    def title_or(self, default: str) -> str:
        """Return the title, or ``default`` if the book has none."""
        return self.title if self.title else default

    def build_index(self) -> 'ManifestIndex':
        return ManifestIndex.from_entries(self.manifest)


@dataclass(frozen=True)
class ManifestIndex:
    """
    Read-only lookups over the manifest, built once per conversion run.

    ``by_id`` maps a spine idref to the resolved archive path;
    ``by_path`` maps a resolved archive path back to its entry, which is how
    image references found while rewriting get their media type.
    """

    by_id: Mapping[str, str]
    by_path: Mapping[str, ManifestEntry]

    @classmethod
    def from_entries(cls, entries: Iterable[ManifestEntry]) -> 'ManifestIndex':
        by_id: Dict[str, str] = {}
        by_path: Dict[str, ManifestEntry] = {}
        for entry in entries:
            if entry.id in by_id:
                logger.warning(f"Duplicate manifest id {entry.id}; later entry wins")
            by_id[entry.id] = entry.resolved_path
            by_path[entry.resolved_path] = entry
        return cls(by_id=MappingProxyType(by_id), by_path=MappingProxyType(by_path))

    def path_for_id(self, idref: str) -> Optional[str]:
        return self.by_id.get(idref)

    def entry_for_path(self, archive_path: str) -> Optional[ManifestEntry]:
        return self.by_path.get(archive_path)

    def __len__(self) -> int:
        return len(self.by_id)
