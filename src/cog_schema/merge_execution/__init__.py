"""Merge execution domain exports."""

from .merge_contracts import MergeOutcome, MergeRequest
from .schema_merge_use_case import (
    MergeExecutionError,
    assemble_combined_schema,
    execute_schema_merge,
    load_definition_registry,
    merge_definitions,
)

__all__ = [
    "MergeExecutionError",
    "MergeOutcome",
    "MergeRequest",
    "assemble_combined_schema",
    "execute_schema_merge",
    "load_definition_registry",
    "merge_definitions",
]
