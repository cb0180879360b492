"""Bootstrap and cache the component meta-schema."""

from __future__ import annotations

import json
import logging
from functools import partial
from importlib import resources
from pathlib import Path
from typing import Any

import requests

from cog_schema.json_tree import JsonContainer, JsonValue, walk_json

from .remote_fetch import DEFAULT_TIMEOUT_SECONDS, TextFetcher, fetch_text

_LOGGER = logging.getLogger(__name__)

BASE_META_SCHEMA_RESOURCE = "base_component.schema"
META_SCHEMA_DEFINITION = "metaSchema"


class MetaSchemaError(Exception):
    """Raised when the meta-schema cannot be built or read."""


def ensure_meta_schema(
    cache_path: Path | str,
    *,
    fetch: TextFetcher | None = None,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    rebuild: bool = False,
) -> dict[str, Any]:
    """Return the cached meta-schema, building and writing it first when absent.

    Building embeds the remote `$schema` document of the packaged base
    meta-schema under `definitions/metaSchema` and points the base's
    reference to it there, so later runs need no network access.
    """
    destination = Path(cache_path)
    if destination.exists() and not rebuild:
        _LOGGER.info("Using cached meta-schema %s", destination)
        return read_meta_schema(destination)

    _LOGGER.info("Building meta-schema %s", destination)
    fetcher = fetch or partial(fetch_text, timeout_seconds=timeout_seconds)
    meta_schema = build_meta_schema(load_base_meta_schema(), fetcher)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(json.dumps(meta_schema, indent=4) + "\n", encoding="utf-8")
    except OSError as exc:
        raise MetaSchemaError(f"Cannot write meta-schema cache {destination}: {exc}") from exc
    return meta_schema


def load_base_meta_schema() -> dict[str, Any]:
    text = resources.files(__package__).joinpath(BASE_META_SCHEMA_RESOURCE).read_text(
        encoding="utf-8"
    )
    return json.loads(text)


def build_meta_schema(base: dict[str, Any], fetch: TextFetcher) -> dict[str, Any]:
    """Embed the document named by `base["$schema"]` into `base`."""
    draft_url = base.get("$schema")
    if not isinstance(draft_url, str):
        raise MetaSchemaError("Base meta-schema does not declare $schema.")
    try:
        draft_text = fetch(draft_url)
    except requests.RequestException as exc:
        raise MetaSchemaError(f"Cannot fetch {draft_url}: {exc}") from exc
    try:
        draft = json.loads(draft_text)
    except json.JSONDecodeError as exc:
        raise MetaSchemaError(f"{draft_url} is not valid JSON: {exc}") from exc

    base.setdefault("definitions", {})[META_SCHEMA_DEFINITION] = draft

    def _point_to_embedded(
        value: JsonValue, _parent: JsonContainer | None, _key: str | int | None
    ) -> bool:
        if isinstance(value, dict) and value.get("$ref") == draft_url:
            value["$ref"] = f"#/definitions/{META_SCHEMA_DEFINITION}"
            return True
        return False

    if not walk_json(base, _point_to_embedded):
        raise MetaSchemaError(f"Base meta-schema never references {draft_url}.")
    return base


def read_meta_schema(path: Path) -> dict[str, Any]:
    try:
        meta_schema = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise MetaSchemaError(f"Cannot read meta-schema {path}: {exc}") from exc
    if not isinstance(meta_schema, dict):
        raise MetaSchemaError(f"Meta-schema {path} must be a JSON object.")
    return meta_schema
