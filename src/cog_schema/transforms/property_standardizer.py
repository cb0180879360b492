"""Inject the standard metadata properties into concrete types."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from .definition_registry import DefinitionRegistry, is_union_type

STANDARD_PROPERTIES: tuple[tuple[str, str], ...] = (
    ("$type", "type"),
    ("$copy", "copy"),
    ("$id", "id"),
    ("$role", "role"),
)
METADATA_PATTERN = "^\\$"


def add_standard_properties(registry: DefinitionRegistry, meta_schema: Mapping[str, Any]) -> None:
    """Standardize every non-union definition in place.

    Each concrete type gets `$type`, `$copy`, `$id` and `$role` as its first
    properties, with `$type` fixed to the type name. The type is closed with
    `additionalProperties: false` except for `$`-prefixed string properties,
    and must declare `$type`. A non-empty `required` list becomes an `anyOf`
    of a bare `$ref` or a fully specified instance.
    """
    meta_definitions = meta_schema.get("definitions")
    if not isinstance(meta_definitions, Mapping):
        raise ValueError("Meta-schema has no definitions for the standard properties.")

    for type_name, definition in registry.items():
        if not isinstance(definition, dict) or is_union_type(definition):
            continue
        definition["properties"] = _standard_properties(type_name, definition, meta_definitions)
        definition["additionalProperties"] = False
        definition["patternProperties"] = {METADATA_PATTERN: {"type": "string"}}
        _encode_required(definition)


def _standard_properties(
    type_name: str, definition: dict[str, Any], meta_definitions: Mapping[str, Any]
) -> dict[str, Any]:
    properties: dict[str, Any] = {}
    for property_name, meta_name in STANDARD_PROPERTIES:
        if meta_name not in meta_definitions:
            raise ValueError(f"Meta-schema is missing definitions/{meta_name}.")
        properties[property_name] = copy.deepcopy(meta_definitions[meta_name])
    properties["$type"]["const"] = type_name

    declared = definition.get("properties")
    if isinstance(declared, Mapping):
        for property_name, property_schema in declared.items():
            if property_name not in properties:
                properties[property_name] = property_schema
    return properties


def _encode_required(definition: dict[str, Any]) -> None:
    required = definition.get("required")
    declared = (
        [name for name in required if name != "$type"] if isinstance(required, list) else []
    )
    definition["required"] = ["$type"]
    if declared:
        definition["anyOf"] = [
            {"title": "Reference", "required": ["$ref"]},
            {"title": "Type", "required": declared},
        ]
