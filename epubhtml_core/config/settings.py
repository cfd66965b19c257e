"""
Configuration Settings
======================

Configuration dataclasses for the EPUB to HTML conversion pipeline.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import List, Dict, Any
import json
import logging

import yaml

logger = logging.getLogger(__name__)

MAX_PARSER_DEPTH = 2048


@dataclass
class PackageConfig:
    """Package description discovery settings."""

    container_path: str = "META-INF/container.xml"
    package_media_type: str = "application/oebps-package+xml"
    package_extension: str = ".opf"
    fallback_dirs: List[str] = field(default_factory=lambda: ["OEBPS/", "OPS/"])
    default_title: str = "Converted EPUB"


@dataclass
class RewriteConfig:
    """Content rewriting policy."""

    dropped_tags: List[str] = field(
        default_factory=lambda: ['script', 'style', 'link', 'meta', 'head', 'title', 'svg']
    )
    stripped_attributes: List[str] = field(default_factory=lambda: ['class'])
    self_closing_tags: List[str] = field(default_factory=lambda: ['img'])
    separator: str = "\n<hr />\n"
    max_depth: int = 256

    def __post_init__(self):
        # libxml2 stops building the tree below this depth even with huge_tree
        if not 1 <= self.max_depth <= MAX_PARSER_DEPTH:
            raise ValueError(f"max_depth must be between 1 and {MAX_PARSER_DEPTH}, got {self.max_depth}")


@dataclass
class OutputConfig:
    """Output document settings."""

    default_output: str = "output.html"
    encoding: str = "utf-8"


@dataclass
class ConverterConfig:
    """
    Complete converter configuration.

    Example:
        config = ConverterConfig()
        config.rewrite.max_depth = 128
        config.package.default_title = "Untitled"
        save_config(config, Path("epub2html.yaml"))
    """

    package: PackageConfig = field(default_factory=PackageConfig)
    rewrite: RewriteConfig = field(default_factory=RewriteConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    log_level: str = "INFO"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'package': asdict(self.package),
            'rewrite': asdict(self.rewrite),
            'output': asdict(self.output),
            'log_level': self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConverterConfig':
        """Create from dictionary."""
        config = cls()

        if 'package' in data:
            config.package = PackageConfig(**data['package'])
        if 'rewrite' in data:
            config.rewrite = RewriteConfig(**data['rewrite'])
        if 'output' in data:
            config.output = OutputConfig(**data['output'])

        if 'log_level' in data:
            config.log_level = data['log_level']

        return config


def load_config(config_path: Path) -> ConverterConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Loaded configuration from {config_path}")
    return ConverterConfig.from_dict(data)


def save_config(config: ConverterConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Raises:
        ValueError: If file format is not supported
    """
    suffix = config_path.suffix.lower()
    data = config.to_dict()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        elif suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> ConverterConfig:
    """Get default configuration."""
    return ConverterConfig()
