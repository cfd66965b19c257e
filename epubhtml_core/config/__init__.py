"""
Configuration Management
========================

Dataclass-based configuration with JSON/YAML persistence.
"""

from epubhtml_core.config.settings import (
    ConverterConfig,
    PackageConfig,
    RewriteConfig,
    OutputConfig,
    load_config,
    save_config,
    get_default_config,
    MAX_PARSER_DEPTH,
)

__all__ = [
    "ConverterConfig",
    "PackageConfig",
    "RewriteConfig",
    "OutputConfig",
    "load_config",
    "save_config",
    "get_default_config",
    "MAX_PARSER_DEPTH",
]
