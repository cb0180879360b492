"""Populate union types from `$implements` declarations."""

from __future__ import annotations

from cog_schema.diagnostics import Diagnostic, DiagnosticCollector
from cog_schema.json_tree import JsonContainer, JsonValue, walk_json

from .definition_registry import (
    DefinitionRegistry,
    definition_ref,
    is_union_type,
    schema_description,
)


def resolve_implements(registry: DefinitionRegistry, diagnostics: DiagnosticCollector) -> None:
    """Add each implementing type to the `oneOf` of the unions it names.

    Only the first `$implements` found in a document (depth-first) is used;
    it is left in place afterwards.
    """
    for type_name, document in registry.items():

        def _register(
            value: JsonValue,
            _parent: JsonContainer | None,
            _key: str | int | None,
            type_name: str = type_name,
        ) -> bool:
            if not isinstance(value, dict):
                return False
            union_names = value.get("$implements")
            if not isinstance(union_names, list) or not union_names:
                return False
            for union_name in union_names:
                _add_union_member(registry, diagnostics, type_name, union_name)
            return True

        walk_json(document, _register)


def _add_union_member(
    registry: DefinitionRegistry,
    diagnostics: DiagnosticCollector,
    type_name: str,
    union_name: JsonValue,
) -> None:
    if not isinstance(union_name, str) or union_name not in registry:
        diagnostics.missing_type(str(union_name))
        return
    union_schema = registry[union_name]
    if not isinstance(union_schema, dict) or not is_union_type(union_schema):
        diagnostics.report(Diagnostic.bad_union(type_name, union_name))
        return

    members = union_schema.get("oneOf")
    if not isinstance(members, list):
        members = []
        union_schema["oneOf"] = members
    reference = definition_ref(type_name)
    if any(isinstance(member, dict) and member.get("$ref") == reference for member in members):
        return
    # The member title is always the implementing type name, so nested titles cannot collide.
    members.append(
        {
            "title": type_name,
            "description": schema_description(registry[type_name]) or type_name,
            "$ref": reference,
        }
    )


def annotate_union_titles(registry: DefinitionRegistry) -> None:
    """Title each direct `oneOf` member after its `type`, replacing any previous title."""

    def _annotate(value: JsonValue, _parent: JsonContainer | None, _key: str | int | None) -> bool:
        if isinstance(value, dict) and isinstance(value.get("oneOf"), list):
            for member in value["oneOf"]:
                if isinstance(member, dict) and isinstance(member.get("type"), str):
                    member["title"] = member["type"]
        return False

    walk_json(registry, _annotate)
