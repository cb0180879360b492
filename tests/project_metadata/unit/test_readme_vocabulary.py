"""Tests for the extension vocabulary documentation."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_readme_documents_extension_keywords_and_commands() -> None:
    readme_path = _project_root() / "README.md"
    assert readme_path.exists(), "Expected README.md to exist."

    text = readme_path.read_text(encoding="utf-8")
    required_terms = (
        "$type",
        "$copy",
        "$id",
        "$role",
        "$implements",
        "unionType",
        "allOf",
        "cog-schema merge",
        "cog-schema meta-schema",
        "cog-schema generate-config",
    )
    for term in required_terms:
        assert term in text, f"Expected README to mention: {term}"
