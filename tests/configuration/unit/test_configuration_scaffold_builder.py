"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from cog_schema.configuration import load_configuration
from cog_schema.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Merge configuration for cog-schema" in scaffold
    assert "merge:" in scaffold
    assert "inputs:" in scaffold
    assert "output:" in scaffold
    assert "meta_schema:" in scaffold
    assert "timeout_seconds:" in scaffold


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "cog-schema.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    configuration = load_configuration(output_path)
    assert configuration.merge.inputs == (str(tmp_path.resolve() / "schemas/**/*.schema"),)


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "cog-schema.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
