"""
Base Adapter Classes
====================

Abstract base class and result container for format adapters. An adapter
turns one input document into a single flattened HTML document.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class AdapterResult:
    """
    Container for adapter results.

    Attributes:
        output_path: Path to the written HTML document (None until written)
        title: Document title used for the output header
        content: Concatenated rewritten chapter bodies in reading order
        chapters_extracted: Number of spine items rewritten
        chapters_skipped: Number of spine items skipped after a per-item failure
        images_extracted: Number of images inlined as data URIs
        images_missing: Number of images emitted without a source
        metadata: Extracted document metadata
        warnings: List of warning messages
    """
    output_path: Optional[Path] = None
    title: str = ""
    content: str = ""
    chapters_extracted: int = 0
    chapters_skipped: int = 0
    images_extracted: int = 0
    images_missing: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)

    def summary(self) -> str:
        """Generate a text summary of adapter results."""
        lines = [
            f"Output: {self.output_path}",
            f"Title: {self.title}",
            f"Chapters: {self.chapters_extracted} ({self.chapters_skipped} skipped)",
            f"Images: {self.images_extracted} inlined, {self.images_missing} missing",
        ]

        if self.warnings:
            lines.append(f"\nWarnings ({len(self.warnings)}):")
            for warning in self.warnings[:3]:
                lines.append(f"  - {warning}")
            if len(self.warnings) > 3:
                lines.append(f"  ... and {len(self.warnings) - 3} more")

        return "\n".join(lines)


class BaseAdapter(ABC):
    """
    Abstract base class for format adapters.

    Each adapter is responsible for:
    1. Locating the document structure (chapters in reading order)
    2. Extracting metadata (title, identifiers)
    3. Rewriting chapter content and inlining media
    4. Handing the combined content to an output writer

    Example:
        class EpubHtmlAdapter(BaseAdapter):
            @property
            def supported_formats(self) -> List[str]:
                return ['.epub']
    """

    @property
    @abstractmethod
    def supported_formats(self) -> List[str]:
        """Return list of supported file extensions."""
        pass

    def supports_format(self, file_path: Path) -> bool:
        """Check if this adapter supports the given file format."""
        suffix = file_path.suffix.lower()
        return suffix in [ext.lower() for ext in self.supported_formats]

    @abstractmethod
    def convert(self,
                input_path: Path,
                output_path: Path,
                **kwargs) -> AdapterResult:
        """
        Convert an input file to a single HTML document.

        Args:
            input_path: Path to the input file
            output_path: Path for the output document
            **kwargs: Additional conversion options

        Returns:
            AdapterResult with conversion outcome
        """
        pass

    @abstractmethod
    def extract_metadata(self, input_path: Path) -> Dict[str, Any]:
        """Extract metadata from input file without full conversion."""
        pass
