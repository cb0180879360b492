"""Schema loading failures."""

from __future__ import annotations


class SchemaLoadError(Exception):
    """Raised when an input schema cannot be read, dereferenced or flattened."""


class ReferenceResolutionError(SchemaLoadError):
    """Raised when an external `$ref` cannot be inlined."""


class AllOfMergeError(SchemaLoadError):
    """Raised when `allOf` entries contain contradicting keywords."""
