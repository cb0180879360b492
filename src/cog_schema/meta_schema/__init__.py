"""Meta-schema exports."""

from .meta_schema_cache import (
    MetaSchemaError,
    build_meta_schema,
    ensure_meta_schema,
    load_base_meta_schema,
)
from .remote_fetch import DEFAULT_TIMEOUT_SECONDS, TextFetcher, fetch_text
from .schema_validator import ComponentSchemaValidator

__all__ = [
    "ComponentSchemaValidator",
    "DEFAULT_TIMEOUT_SECONDS",
    "MetaSchemaError",
    "TextFetcher",
    "build_meta_schema",
    "ensure_meta_schema",
    "fetch_text",
    "load_base_meta_schema",
]
