"""Schema merge use-case service."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from cog_schema.diagnostics import Diagnostic, DiagnosticCollector
from cog_schema.meta_schema import ComponentSchemaValidator
from cog_schema.schema_loading import (
    DocumentLoader,
    SchemaLoadError,
    load_component_schema,
    type_name_for,
)
from cog_schema.transforms import (
    DefinitionRegistry,
    add_standard_properties,
    annotate_union_titles,
    check_lg_roles,
    definition_ref,
    expand_type_references,
    is_union_type,
    resolve_implements,
    rewrite_definition_references,
    schema_description,
    verify_internal_references,
)

from .merge_contracts import MergeOutcome, MergeRequest

_LOGGER = logging.getLogger(__name__)

DRAFT_07_SCHEMA = "http://json-schema.org/draft-07/schema#"


class MergeExecutionError(Exception):
    """Raised when the combined schema cannot be written."""


def execute_schema_merge(
    request: MergeRequest,
    *,
    diagnostics: DiagnosticCollector | None = None,
    loader: DocumentLoader | None = None,
) -> MergeOutcome:
    """Merge the requested schema files and write the result when no diagnostic fired."""
    collector = diagnostics if diagnostics is not None else DiagnosticCollector()
    validator = ComponentSchemaValidator(request.meta_schema)
    registry = load_definition_registry(
        request.schema_paths, validator=validator, diagnostics=collector, loader=loader
    )
    combined = merge_definitions(registry, request.meta_schema, collector)

    if collector.failed:
        return MergeOutcome(
            output_path=request.output_path,
            written=False,
            combined=combined,
            diagnostics=collector.diagnostics,
        )

    write_combined_schema(request.output_path, combined)
    return MergeOutcome(
        output_path=request.output_path,
        written=True,
        combined=combined,
        diagnostics=collector.diagnostics,
    )


def load_definition_registry(
    schema_paths: Iterable[Path],
    *,
    validator: ComponentSchemaValidator,
    diagnostics: DiagnosticCollector,
    loader: DocumentLoader | None = None,
) -> DefinitionRegistry:
    """Load, validate and register each schema file in order.

    Files that fail to load are reported and skipped. A later file with the
    same type name replaces the earlier one.
    """
    registry: DefinitionRegistry = {}
    for path in schema_paths:
        _LOGGER.info("Parsing %s", path)
        try:
            schema = load_component_schema(path, loader=loader)
        except SchemaLoadError as exc:
            diagnostics.report(Diagnostic.parse_error(str(path), exc))
            continue

        for message in validator.validate(schema):
            diagnostics.report(Diagnostic.schema_validation(str(path), message))
        if not schema.get("type") and not is_union_type(schema):
            schema["type"] = "object"

        type_name = type_name_for(path)
        if type_name in registry:
            _LOGGER.warning("%s replaces an earlier definition of %s", path, type_name)
        registry[type_name] = schema
    return registry


def merge_definitions(
    registry: DefinitionRegistry,
    meta_schema: Mapping[str, Any],
    diagnostics: DiagnosticCollector,
) -> dict[str, Any]:
    """Run every merge stage over `registry` and return the combined schema."""
    rewrite_definition_references(registry)
    resolve_implements(registry, diagnostics)
    annotate_union_titles(registry)
    expand_type_references(registry, diagnostics)
    add_standard_properties(registry, meta_schema)
    check_lg_roles(registry, diagnostics)
    combined = assemble_combined_schema(registry)
    verify_internal_references(combined, diagnostics)
    return combined


def assemble_combined_schema(registry: DefinitionRegistry) -> dict[str, Any]:
    """Wrap the definitions in a schema accepting any concrete component type."""
    concrete_names = sorted(
        type_name for type_name, schema in registry.items() if not is_union_type(schema)
    )
    return {
        "$schema": DRAFT_07_SCHEMA,
        "type": "object",
        "title": "Component types",
        "description": "These are all of the types that can be created by the loader.",
        "oneOf": [
            {
                "title": type_name,
                "description": schema_description(registry[type_name]) or "",
                "$ref": definition_ref(type_name),
            }
            for type_name in concrete_names
        ],
        "definitions": registry,
    }


def write_combined_schema(output_path: Path, combined: Mapping[str, Any]) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(combined, indent=4, ensure_ascii=False) + "\n", encoding="utf-8"
        )
    except OSError as exc:
        raise MergeExecutionError(f"Cannot write {output_path}: {exc}") from exc

