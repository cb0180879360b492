"""Flatten `allOf` compositions into single schemas."""

from __future__ import annotations

import copy
from typing import Any
from urllib.parse import unquote

from .load_errors import AllOfMergeError

_KEYED_KEYWORDS = frozenset({"properties", "patternProperties", "definitions"})
_UNION_KEYWORDS = frozenset({"required", "$implements"})
_FIRST_WINS_KEYWORDS = frozenset({"title", "description", "default", "examples", "$comment"})
_LOWER_BOUNDS = frozenset(
    {"minimum", "exclusiveMinimum", "minLength", "minItems", "minProperties"}
)
_UPPER_BOUNDS = frozenset(
    {"maximum", "exclusiveMaximum", "maxLength", "maxItems", "maxProperties"}
)


def merge_all_of(schema: Any) -> Any:
    """Return a copy of `schema` with every `allOf` merged into its parent.

    Nested compositions are flattened first, so entries are merged as plain
    schemas. Entries that are local `#/...` references are replaced by their
    target in `schema` before merging. `anyOf` and `oneOf` are kept as they are.
    """
    return _flatten(schema, schema, frozenset())


def _flatten(node: Any, root: Any, resolving: frozenset[str]) -> Any:
    if isinstance(node, list):
        return [_flatten(item, root, resolving) for item in node]
    if not isinstance(node, dict):
        return node

    result = {key: _flatten(value, root, resolving) for key, value in node.items()}
    entries = result.pop("allOf", None)
    if entries is None:
        return result
    if not isinstance(entries, list):
        raise AllOfMergeError("allOf must be a list of schemas.")
    for entry in entries:
        entry = _inline_local_reference(entry, root, resolving)
        if entry is True:
            continue
        if not isinstance(entry, dict):
            raise AllOfMergeError(f"Cannot merge allOf entry {entry!r}.")
        result = _merge_schemas(result, entry)
    return result


def _inline_local_reference(entry: Any, root: Any, resolving: frozenset[str]) -> Any:
    while isinstance(entry, dict) and _is_local_reference(entry.get("$ref")):
        ref = entry["$ref"]
        if ref in resolving:
            raise AllOfMergeError(f"allOf reference {ref} refers back to itself.")
        resolving = resolving | {ref}
        target = _flatten(_resolve_local_pointer(root, ref), root, resolving)
        siblings = {key: value for key, value in entry.items() if key != "$ref"}
        if siblings:
            entry = _merge_subschemas("$ref", target, siblings)
        else:
            entry = copy.deepcopy(target)
    return entry


def _is_local_reference(ref: Any) -> bool:
    return isinstance(ref, str) and ref.startswith("#")


def _resolve_local_pointer(root: Any, ref: str) -> Any:
    pointer = unquote(ref[1:])
    if not pointer:
        return root
    if not pointer.startswith("/"):
        raise AllOfMergeError(f"Cannot resolve allOf reference {ref}.")
    node = root
    for token in pointer[1:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and token in node:
            node = node[token]
        elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
            node = node[int(token)]
        else:
            raise AllOfMergeError(f"Cannot resolve allOf reference {ref}.")
    return node


def _merge_schemas(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for keyword, value in overlay.items():
        if keyword not in merged:
            merged[keyword] = copy.deepcopy(value)
        else:
            merged[keyword] = _merge_keyword(keyword, merged[keyword], value)
    return merged


def _merge_keyword(keyword: str, current: Any, incoming: Any) -> Any:
    if current == incoming:
        return current
    if keyword in _FIRST_WINS_KEYWORDS:
        return current
    if keyword in _KEYED_KEYWORDS and isinstance(current, dict) and isinstance(incoming, dict):
        return _merge_keyed(current, incoming)
    if keyword in _UNION_KEYWORDS and isinstance(current, list) and isinstance(incoming, list):
        return current + [item for item in incoming if item not in current]
    if keyword in _LOWER_BOUNDS and _both_numbers(current, incoming):
        return max(current, incoming)
    if keyword in _UPPER_BOUNDS and _both_numbers(current, incoming):
        return min(current, incoming)
    if keyword == "type":
        return _merge_types(current, incoming)
    if keyword == "enum" and isinstance(current, list) and isinstance(incoming, list):
        common = [item for item in current if item in incoming]
        if not common:
            raise AllOfMergeError(f"allOf enums {current!r} and {incoming!r} have no common value.")
        return common
    return _merge_subschemas(keyword, current, incoming)


def _merge_keyed(current: dict[str, Any], incoming: dict[str, Any]) -> dict[str, Any]:
    merged = dict(current)
    for name, schema in incoming.items():
        if name not in merged:
            merged[name] = copy.deepcopy(schema)
        elif merged[name] != schema:
            merged[name] = _merge_subschemas(name, merged[name], schema)
    return merged


def _merge_types(current: Any, incoming: Any) -> Any:
    current_types = [current] if isinstance(current, str) else list(current)
    incoming_types = [incoming] if isinstance(incoming, str) else list(incoming)
    common = [name for name in current_types if name in incoming_types]
    if "number" in current_types and "integer" in incoming_types and "integer" not in common:
        common.append("integer")
    if "integer" in current_types and "number" in incoming_types and "integer" not in common:
        common.append("integer")
    if not common:
        raise AllOfMergeError(f"allOf types {current!r} and {incoming!r} are incompatible.")
    return common[0] if len(common) == 1 else common


def _both_numbers(left: Any, right: Any) -> bool:
    return all(
        isinstance(value, (int, float)) and not isinstance(value, bool) for value in (left, right)
    )


def _merge_subschemas(keyword: str, current: Any, incoming: Any) -> Any:
    if current is False or incoming is False:
        return False
    if current is True:
        return copy.deepcopy(incoming)
    if incoming is True:
        return current
    if isinstance(current, dict) and isinstance(incoming, dict):
        return _merge_schemas(current, incoming)
    raise AllOfMergeError(
        f"Cannot merge allOf values for '{keyword}': {current!r} and {incoming!r}."
    )
