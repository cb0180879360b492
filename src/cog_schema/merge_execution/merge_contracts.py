"""Merge execution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cog_schema.diagnostics import Diagnostic


@dataclass(frozen=True)
class MergeRequest:
    """Input contract for one merge run."""

    schema_paths: tuple[Path, ...]
    output_path: Path
    meta_schema: Mapping[str, Any]


@dataclass(frozen=True)
class MergeOutcome:
    """Output contract for one completed merge run."""

    output_path: Path
    written: bool
    combined: dict[str, Any]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def failed(self) -> bool:
        return bool(self.diagnostics)
