"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "cog-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Merge configuration for cog-schema.
# Relative paths are resolved against the directory of this file.
# Command line arguments take precedence over these values.

merge:
  # Glob patterns of the component .schema files to merge.
  inputs:
    - "schemas/**/*.schema"
  # Combined schema to write when the merge succeeds.
  output: "app.schema"

meta_schema:
  # Cached meta-schema; built from the packaged base on first use.
  # cache_path: "cogSchema.schema"
  # Seconds to wait for the remote draft-07 meta-schema while building.
  timeout_seconds: 30
"""


def build_placeholder_configuration() -> str:
    """Build a YAML merge configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the merge configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
