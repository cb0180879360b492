"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    DEFAULT_OUTPUT_FILENAME,
    Configuration,
    MergeSettings,
    MetaSchemaSettings,
    default_configuration,
    default_meta_schema_cache_path,
)

__all__ = [
    "Configuration",
    "MergeSettings",
    "MetaSchemaSettings",
    "ConfigurationError",
    "load_configuration",
    "default_configuration",
    "default_meta_schema_cache_path",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_OUTPUT_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
