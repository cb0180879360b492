"""Inline external references of one schema file."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urldefrag, urljoin

import jsonref

from .load_errors import ReferenceResolutionError

DocumentLoader = Callable[[str], Any]


def resolve_references(path: Path | str, *, loader: DocumentLoader | None = None) -> Any:
    """Return the document at `path` with every external `$ref` inlined.

    References to other files or URLs are replaced by their target, with any
    keywords next to the `$ref` merged over it. References that point back
    into `path` itself stay `$ref` nodes, written as `#<fragment>`.
    """
    source = Path(path).resolve()
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ReferenceResolutionError(f"Cannot read {source}: {exc}") from exc

    root_uri = source.as_uri()
    proxied = jsonref.replace_refs(
        raw,
        base_uri=root_uri,
        loader=loader or jsonref.jsonloader,
        proxies=True,
        lazy_load=True,
    )
    try:
        return _materialize(proxied, root_uri, root_uri, frozenset())
    except RecursionError as exc:
        raise ReferenceResolutionError(f"References in {source} nest too deeply.") from exc


def _materialize(node: Any, base_uri: str, root_uri: str, active: frozenset[str]) -> Any:
    if isinstance(node, jsonref.JsonRef):
        return _materialize_reference(node, base_uri, root_uri, active)
    if isinstance(node, Mapping):
        return {
            key: _materialize(value, base_uri, root_uri, active) for key, value in node.items()
        }
    if isinstance(node, list):
        return [_materialize(item, base_uri, root_uri, active) for item in node]
    return node


def _materialize_reference(
    reference: jsonref.JsonRef, base_uri: str, root_uri: str, active: frozenset[str]
) -> Any:
    # Only `__reference__` and `__subject__` are read off the proxy itself.
    pointer_object = reference.__reference__
    ref = pointer_object["$ref"]
    full_uri = urljoin(base_uri, ref)
    document_uri, fragment = urldefrag(full_uri)
    siblings = {
        key: _materialize(value, base_uri, root_uri, active)
        for key, value in pointer_object.items()
        if key != "$ref"
    }
    if document_uri == root_uri:
        return {"$ref": f"#{fragment}", **siblings}
    if full_uri in active:
        raise ReferenceResolutionError(f"Circular reference to {full_uri}")

    try:
        target = reference.__subject__
    except jsonref.JsonRefError as exc:
        raise ReferenceResolutionError(f"Cannot resolve {ref}: {exc}") from exc
    resolved = _materialize(target, document_uri, root_uri, active | {full_uri})
    if siblings and isinstance(resolved, dict):
        resolved.update(siblings)
    return resolved
