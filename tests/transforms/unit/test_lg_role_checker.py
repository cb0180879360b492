"""LG role checker tests."""

from __future__ import annotations

from cog_schema.diagnostics import DiagnosticCollector, DiagnosticKind
from cog_schema.transforms import check_lg_roles


def test_untyped_lg_property_defaults_to_string() -> None:
    registry = {"Reply": {"properties": {"activity": {"$role": "lg"}}}}
    collector = DiagnosticCollector()

    check_lg_roles(registry, collector)

    assert registry["Reply"]["properties"]["activity"]["type"] == "string"
    assert collector.failed is False


def test_non_string_lg_property_is_reported_once() -> None:
    registry = {
        "Reply": {
            "properties": {
                "activity": {"$role": "lg", "type": "number"},
                "text": {"$role": "lg", "type": "string"},
            }
        }
    }
    collector = DiagnosticCollector()

    check_lg_roles(registry, collector)

    bad_roles = collector.of_kind(DiagnosticKind.BAD_ROLE_TYPE)
    assert len(bad_roles) == 1
    assert bad_roles[0].message == "activity has a $role of lg and must be a string."
    assert registry["Reply"]["properties"]["activity"]["type"] == "number"


def test_other_roles_are_ignored() -> None:
    registry = {"Reply": {"properties": {"condition": {"$role": "expression"}}}}
    collector = DiagnosticCollector()

    check_lg_roles(registry, collector)

    assert "type" not in registry["Reply"]["properties"]["condition"]
    assert collector.failed is False
