"""Check that `lg` role properties are strings."""

from __future__ import annotations

from cog_schema.diagnostics import Diagnostic, DiagnosticCollector
from cog_schema.json_tree import JsonContainer, JsonValue, walk_json

from .definition_registry import LG_ROLE, DefinitionRegistry


def check_lg_roles(registry: DefinitionRegistry, diagnostics: DiagnosticCollector) -> None:
    """Default `$role: lg` properties to strings and report any other type."""

    def _check(value: JsonValue, _parent: JsonContainer | None, key: str | int | None) -> bool:
        if isinstance(value, dict) and value.get("$role") == LG_ROLE:
            if not value.get("type"):
                value["type"] = "string"
            elif value["type"] != "string":
                diagnostics.report(Diagnostic.bad_role_type(str(key)))
        return False

    walk_json(registry, _check)
