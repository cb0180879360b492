"""Schema loading exports."""

from .allof_merger import merge_all_of
from .load_errors import AllOfMergeError, ReferenceResolutionError, SchemaLoadError
from .reference_resolver import DocumentLoader, resolve_references
from .schema_sources import expand_schema_patterns, load_component_schema, type_name_for

__all__ = [
    "AllOfMergeError",
    "DocumentLoader",
    "ReferenceResolutionError",
    "SchemaLoadError",
    "expand_schema_patterns",
    "load_component_schema",
    "merge_all_of",
    "resolve_references",
    "type_name_for",
]
