"""Namespace per-document internal references."""

from __future__ import annotations

from cog_schema.json_tree import JsonContainer, JsonValue, walk_json

from .definition_registry import DEFINITIONS_PREFIX, DefinitionRegistry


def rewrite_definition_references(registry: DefinitionRegistry) -> None:
    """Scope every `#/definitions/...` ref under its own type's definitions.

    `#/definitions/Inner/properties/x` inside type `Outer` becomes
    `#/definitions/Outer/definitions/Inner/properties/x`.
    """
    for type_name, document in registry.items():
        scoped_prefix = f"{DEFINITIONS_PREFIX}{type_name}/definitions/"

        def _rewrite(
            value: JsonValue,
            _parent: JsonContainer | None,
            _key: str | int | None,
            scoped_prefix: str = scoped_prefix,
        ) -> bool:
            if isinstance(value, dict):
                reference = value.get("$ref")
                if isinstance(reference, str) and reference.startswith(DEFINITIONS_PREFIX):
                    value["$ref"] = scoped_prefix + reference[len(DEFINITIONS_PREFIX) :]
            return False

        walk_json(document, _rewrite)
