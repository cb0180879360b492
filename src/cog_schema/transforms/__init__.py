"""Merge stage exports."""

from .definition_registry import (
    DEFINITIONS_PREFIX,
    DefinitionRegistry,
    definition_ref,
    is_union_type,
    schema_description,
)
from .lg_role_checker import check_lg_roles
from .property_standardizer import add_standard_properties
from .reference_integrity import verify_internal_references
from .reference_rewriter import rewrite_definition_references
from .type_expander import expand_type_references
from .union_resolver import annotate_union_titles, resolve_implements

__all__ = [
    "DEFINITIONS_PREFIX",
    "DefinitionRegistry",
    "add_standard_properties",
    "annotate_union_titles",
    "check_lg_roles",
    "definition_ref",
    "expand_type_references",
    "is_union_type",
    "resolve_implements",
    "rewrite_definition_references",
    "schema_description",
    "verify_internal_references",
]
