"""Definition registry helpers shared by every merge stage."""

from __future__ import annotations

from typing import Any, TypeAlias

from cog_schema.json_tree import JsonValue

DefinitionRegistry: TypeAlias = dict[str, JsonValue]

DEFINITIONS_PREFIX = "#/definitions/"
UNION_ROLE = "unionType"
LG_ROLE = "lg"


def definition_ref(type_name: str) -> str:
    """Return the pointer to `type_name` in the combined definitions map."""
    return f"{DEFINITIONS_PREFIX}{type_name}"


def is_union_type(schema: Any) -> bool:
    return isinstance(schema, dict) and schema.get("$role") == UNION_ROLE


def schema_description(schema: Any) -> str | None:
    if isinstance(schema, dict):
        description = schema.get("description")
        if isinstance(description, str) and description:
            return description
    return None
