"""Expand `$type` shorthand into definition references."""

from __future__ import annotations

from cog_schema.diagnostics import DiagnosticCollector
from cog_schema.json_tree import JsonContainer, JsonValue, walk_json

from .definition_registry import DefinitionRegistry, definition_ref


def expand_type_references(registry: DefinitionRegistry, diagnostics: DiagnosticCollector) -> None:
    """Point every `$type: "Name"` node at `#/definitions/Name`.

    Unknown names are reported once per run; the node is left unchanged.
    """

    def _expand(value: JsonValue, _parent: JsonContainer | None, _key: str | int | None) -> bool:
        if isinstance(value, dict):
            type_name = value.get("$type")
            if isinstance(type_name, str) and type_name:
                if type_name in registry:
                    value["$ref"] = definition_ref(type_name)
                else:
                    diagnostics.missing_type(type_name)
        return False

    walk_json(registry, _expand)
