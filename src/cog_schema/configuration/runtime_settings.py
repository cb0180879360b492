"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

DEFAULT_OUTPUT_FILENAME = "app.schema"
META_SCHEMA_CACHE_FILENAME = "cogSchema.schema"


def default_meta_schema_cache_path() -> Path:
    return Path(click.get_app_dir("cog-schema")) / META_SCHEMA_CACHE_FILENAME


@dataclass(frozen=True)
class MergeSettings:
    """Inputs and destination of a merge run."""

    inputs: tuple[str, ...]
    output_path: Path


@dataclass(frozen=True)
class MetaSchemaSettings:
    """Location of the cached meta-schema and how to rebuild it."""

    cache_path: Path
    timeout_seconds: int


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    merge: MergeSettings
    meta_schema: MetaSchemaSettings


def default_configuration() -> Configuration:
    """Return the configuration used when no configuration file is given."""
    return Configuration(
        path=None,
        merge=MergeSettings(inputs=(), output_path=Path(DEFAULT_OUTPUT_FILENAME)),
        meta_schema=MetaSchemaSettings(
            cache_path=default_meta_schema_cache_path(),
            timeout_seconds=30,
        ),
    )
