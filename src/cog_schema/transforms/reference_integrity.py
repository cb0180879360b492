"""Check that internal references of the combined schema resolve."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cog_schema.diagnostics import Diagnostic, DiagnosticCollector
from cog_schema.json_tree import JsonContainer, JsonValue, walk_json

_MISSING = object()


def verify_internal_references(
    combined: Mapping[str, Any], diagnostics: DiagnosticCollector
) -> None:
    """Report every `#/...` reference inside a definition that points nowhere."""
    definitions = combined.get("definitions")
    if not isinstance(definitions, Mapping):
        return
    for type_name, definition in definitions.items():

        def _verify(
            value: JsonValue,
            _parent: JsonContainer | None,
            _key: str | int | None,
            type_name: str = type_name,
        ) -> bool:
            if isinstance(value, dict):
                reference = value.get("$ref")
                if (
                    isinstance(reference, str)
                    and reference.startswith("#/")
                    and resolve_pointer(combined, reference[1:]) is _MISSING
                ):
                    diagnostics.report_once(Diagnostic.dangling_reference(type_name, reference))
            return False

        walk_json(definition, _verify)


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Return the value at JSON pointer `pointer`, or a sentinel when it does not exist."""
    current = document
    for raw_token in pointer.split("/")[1:]:
        token = raw_token.replace("~1", "/").replace("~0", "~")
        if isinstance(current, Mapping) and token in current:
            current = current[token]
        elif isinstance(current, list) and token.isdigit() and int(token) < len(current):
            current = current[int(token)]
        else:
            return _MISSING
    return current
