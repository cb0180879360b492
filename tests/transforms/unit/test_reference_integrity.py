"""Reference integrity check tests."""

from __future__ import annotations

from cog_schema.diagnostics import DiagnosticCollector, DiagnosticKind
from cog_schema.transforms import verify_internal_references
from cog_schema.transforms.reference_integrity import resolve_pointer


def test_resolvable_references_are_accepted() -> None:
    combined = {
        "definitions": {
            "Dialog": {
                "definitions": {"a/b": {"type": "string"}},
                "properties": {
                    "escaped": {"$ref": "#/definitions/Dialog/definitions/a~1b"},
                    "other": {"$ref": "#/definitions/Trigger"},
                },
            },
            "Trigger": {"type": "object"},
        }
    }
    collector = DiagnosticCollector()

    verify_internal_references(combined, collector)

    assert collector.failed is False


def test_dangling_reference_is_reported_once() -> None:
    combined = {
        "definitions": {
            "Dialog": {
                "properties": {
                    "first": {"$ref": "#/definitions/Dialog/definitions/missing"},
                    "second": {"$ref": "#/definitions/Dialog/definitions/missing"},
                }
            }
        }
    }
    collector = DiagnosticCollector()

    verify_internal_references(combined, collector)

    dangling = collector.of_kind(DiagnosticKind.DANGLING_REFERENCE)
    assert len(dangling) == 1
    assert dangling[0].message == (
        "Dialog references #/definitions/Dialog/definitions/missing which does not exist."
    )


def test_pointer_resolution_walks_lists() -> None:
    document = {"oneOf": [{"title": "first"}, {"title": "second"}]}

    assert resolve_pointer(document, "/oneOf/1/title") == "second"
    assert resolve_pointer(document, "") is document
