"""
Base Writer Classes
===================

Abstract output writer. A writer wraps the rewritten chapter content in a
complete document and persists it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    """Outcome of writing an output document."""

    output_path: Optional[Path] = None
    bytes_written: int = 0

    def summary(self) -> str:
        size_kb = self.bytes_written / 1024
        return f"Wrote {self.output_path} ({size_kb:.1f} KB)"


class BaseWriter(ABC):
    """
    Abstract base class for output writers.

    Example:
        class TextWriter(BaseWriter):
            def render(self, title, content):
                return f"{title}\\n\\n{content}"
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    @abstractmethod
    def render(self, title: str, content: str) -> str:
        """Return the full output document for ``content``."""
        pass

    def write(self, output_path: Path, title: str, content: str) -> WriteResult:
        """
        Render and write the output document.

        Raises:
            OSError: If the output file cannot be created or written
        """
        document = self.render(title, content).encode(self.encoding)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(document)
        logger.info(f"Wrote {len(document)} bytes to {output_path}")
        return WriteResult(output_path=output_path, bytes_written=len(document))

    @property
    def output_format(self) -> str:
        """Return the format of documents written (e.g., 'HTML')."""
        return "Unknown"
