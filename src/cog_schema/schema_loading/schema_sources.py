"""Input discovery and component schema loading."""

from __future__ import annotations

import glob
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .allof_merger import merge_all_of
from .load_errors import SchemaLoadError
from .reference_resolver import DocumentLoader, resolve_references


def expand_schema_patterns(patterns: Iterable[str]) -> list[Path]:
    """Expand glob patterns into a sorted list of distinct schema files."""
    matches: set[Path] = set()
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            path = Path(match)
            if path.is_file():
                matches.add(path)
    return sorted(matches)


def type_name_for(path: Path | str) -> str:
    """Return the type name of a schema file: its name without the last extension."""
    return Path(path).stem


def load_component_schema(
    path: Path | str, *, loader: DocumentLoader | None = None
) -> dict[str, Any]:
    """Dereference and flatten one schema file and drop its `$schema` keyword."""
    document = resolve_references(path, loader=loader)
    try:
        schema = merge_all_of(document)
    except RecursionError as exc:
        raise SchemaLoadError(f"allOf compositions in {path} nest too deeply.") from exc
    if not isinstance(schema, dict):
        raise SchemaLoadError(f"{path} must contain a JSON object schema.")
    schema.pop("$schema", None)
    return schema
