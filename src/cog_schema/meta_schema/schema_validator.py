"""Validate component schemas against the meta-schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft7Validator


class ComponentSchemaValidator:
    """Draft-07 validator bound to one meta-schema."""

    def __init__(self, meta_schema: Mapping[str, Any]) -> None:
        self._validator = Draft7Validator(meta_schema)

    def validate(self, schema: Any) -> list[str]:
        """Return one message per violation, ordered by location."""
        errors = sorted(self._validator.iter_errors(schema), key=lambda error: error.json_path)
        return [f"{error.json_path}: {error.message}" for error in errors]
