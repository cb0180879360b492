"""Reference rewriter tests."""

from __future__ import annotations

from cog_schema.transforms import rewrite_definition_references


def test_internal_definition_refs_are_scoped_under_owning_type() -> None:
    registry = {
        "Dialog": {
            "properties": {
                "step": {"$ref": "#/definitions/step"},
                "nested": {"items": {"$ref": "#/definitions/step/properties/name"}},
            },
            "definitions": {"step": {"type": "object"}},
        },
        "Other": {"properties": {"step": {"$ref": "#/definitions/step"}}},
    }

    rewrite_definition_references(registry)

    dialog_properties = registry["Dialog"]["properties"]
    assert dialog_properties["step"]["$ref"] == "#/definitions/Dialog/definitions/step"
    assert (
        dialog_properties["nested"]["items"]["$ref"]
        == "#/definitions/Dialog/definitions/step/properties/name"
    )
    assert registry["Other"]["properties"]["step"]["$ref"] == "#/definitions/Other/definitions/step"


def test_other_refs_are_left_alone() -> None:
    registry = {
        "Dialog": {
            "properties": {
                "root": {"$ref": "#"},
                "local": {"$ref": "#/properties/root"},
                "remote": {"$ref": "https://example.com/schema.json#/definitions/x"},
            }
        }
    }

    rewrite_definition_references(registry)

    properties = registry["Dialog"]["properties"]
    assert properties["root"]["$ref"] == "#"
    assert properties["local"]["$ref"] == "#/properties/root"
    assert properties["remote"]["$ref"] == "https://example.com/schema.json#/definitions/x"
