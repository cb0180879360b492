"""Reference resolver tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from cog_schema.schema_loading import ReferenceResolutionError, resolve_references


def _write_json(path: Path, value: object) -> Path:
    path.write_text(json.dumps(value), encoding="utf-8")
    return path


def test_external_refs_are_inlined_and_local_refs_kept(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "common.json",
        {
            "definitions": {
                "name": {"$ref": "#/definitions/text"},
                "text": {"type": "string"},
            }
        },
    )
    root = _write_json(
        tmp_path / "Greeting.schema",
        {
            "properties": {
                "name": {"$ref": "common.json#/definitions/name", "description": "Who to greet"},
                "step": {"$ref": "#/definitions/step"},
            },
            "definitions": {"step": {"type": "object"}},
        },
    )

    document = resolve_references(root)

    assert document["properties"]["name"] == {"type": "string", "description": "Who to greet"}
    assert document["properties"]["step"] == {"$ref": "#/definitions/step"}
    assert document["definitions"] == {"step": {"type": "object"}}


def test_refs_back_into_the_root_file_stay_local(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "wrapper.json",
        {"type": "object", "properties": {"step": {"$ref": "Greeting.schema#/definitions/step"}}},
    )
    root = _write_json(
        tmp_path / "Greeting.schema",
        {
            "properties": {"wrapper": {"$ref": "wrapper.json"}},
            "definitions": {"step": {"type": "object"}},
        },
    )

    document = resolve_references(root)

    assert document["properties"]["wrapper"] == {
        "type": "object",
        "properties": {"step": {"$ref": "#/definitions/step"}},
    }


def test_inlined_targets_are_independent_copies(tmp_path: Path) -> None:
    _write_json(tmp_path / "common.json", {"type": "string"})
    root = _write_json(
        tmp_path / "Pair.schema",
        {"properties": {"a": {"$ref": "common.json"}, "b": {"$ref": "common.json"}}},
    )

    document = resolve_references(root)
    document["properties"]["a"]["title"] = "changed"

    assert document["properties"]["b"] == {"type": "string"}


def test_missing_external_file_raises(tmp_path: Path) -> None:
    root = _write_json(tmp_path / "Broken.schema", {"properties": {"x": {"$ref": "missing.json"}}})

    with pytest.raises(ReferenceResolutionError, match="missing.json"):
        resolve_references(root)


def test_circular_external_refs_raise(tmp_path: Path) -> None:
    _write_json(tmp_path / "node.json", {"properties": {"next": {"$ref": "node.json"}}})
    root = _write_json(tmp_path / "List.schema", {"properties": {"head": {"$ref": "node.json"}}})

    with pytest.raises(ReferenceResolutionError, match="Circular reference"):
        resolve_references(root)


def test_invalid_json_raises(tmp_path: Path) -> None:
    root = tmp_path / "Broken.schema"
    root.write_text("{not json", encoding="utf-8")

    with pytest.raises(ReferenceResolutionError, match="Cannot read"):
        resolve_references(root)


def test_document_with_only_local_refs_is_returned_unchanged(tmp_path: Path) -> None:
    schema = {
        "definitions": {"Inner": {"type": "object"}},
        "properties": {"name": {"$ref": "#/definitions/Inner", "description": "Inner value"}},
    }
    root = _write_json(tmp_path / "Outer.schema", schema)

    assert resolve_references(root) == schema


def test_loader_failures_raise_resolution_errors(tmp_path: Path) -> None:
    root = _write_json(
        tmp_path / "Remote.schema", {"properties": {"x": {"$ref": "https://example.invalid/x"}}}
    )

    def _failing_loader(uri: str) -> object:
        raise RuntimeError(f"offline: {uri}")

    with pytest.raises(ReferenceResolutionError, match="Cannot resolve https://example.invalid/x"):
        resolve_references(root, loader=_failing_loader)
