"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_OUTPUT_FILENAME,
    Configuration,
    MergeSettings,
    MetaSchemaSettings,
    default_meta_schema_cache_path,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    merge = _parse_merge_section(parsed.get("merge"), base_path)
    meta_schema = _parse_meta_schema_section(parsed.get("meta_schema"), base_path)
    return Configuration(path=path, merge=merge, meta_schema=meta_schema)


def _parse_merge_section(value: Any, base_path: Path) -> MergeSettings:
    section = _optional_mapping(value, "merge")
    inputs = _normalize_patterns(section.get("inputs"))
    output = _optional_string(section.get("output"), "merge.output") or DEFAULT_OUTPUT_FILENAME
    return MergeSettings(
        inputs=tuple(_resolve_pattern(base_path, pattern) for pattern in inputs),
        output_path=_resolve_path(base_path, output),
    )


def _parse_meta_schema_section(value: Any, base_path: Path) -> MetaSchemaSettings:
    section = _optional_mapping(value, "meta_schema")
    cache_path = _optional_string(section.get("cache_path"), "meta_schema.cache_path")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "meta_schema.timeout_seconds"
    )
    return MetaSchemaSettings(
        cache_path=(
            _resolve_path(base_path, cache_path) if cache_path else default_meta_schema_cache_path()
        ),
        timeout_seconds=timeout_seconds,
    )


def _normalize_patterns(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("merge.inputs entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError("merge.inputs must be a string or list of strings.")


def _resolve_pattern(base_path: Path, pattern: str) -> str:
    if Path(pattern).is_absolute():
        return pattern
    return str(base_path / pattern)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
