"""Diagnostic domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(str, Enum):
    """Category of a non-fatal problem found during a merge run."""

    MISSING_TYPE = "missing_type"
    BAD_UNION = "bad_union"
    SCHEMA_VALIDATION = "schema_validation"
    PARSE_ERROR = "parse_error"
    BAD_ROLE_TYPE = "bad_role_type"
    DANGLING_REFERENCE = "dangling_reference"


@dataclass(frozen=True)
class Diagnostic:
    """One reported problem of a merge run."""

    kind: DiagnosticKind
    subject: str
    message: str

    @staticmethod
    def missing_type(type_name: str) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.MISSING_TYPE,
            subject=type_name,
            message=f"Missing {type_name} schema file from merge.",
        )

    @staticmethod
    def bad_union(type_name: str, union_name: str) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.BAD_UNION,
            subject=type_name,
            message=f"{type_name} $implements {union_name} which is not a unionType.",
        )

    @staticmethod
    def schema_validation(source: str, message: str) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.SCHEMA_VALIDATION,
            subject=source,
            message=f"{source}: {message}",
        )

    @staticmethod
    def parse_error(source: str, error: Exception) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.PARSE_ERROR,
            subject=source,
            message=f"{source}: {error}",
        )

    @staticmethod
    def bad_role_type(property_name: str) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.BAD_ROLE_TYPE,
            subject=property_name,
            message=f"{property_name} has a $role of lg and must be a string.",
        )

    @staticmethod
    def dangling_reference(type_name: str, reference: str) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.DANGLING_REFERENCE,
            subject=reference,
            message=f"{type_name} references {reference} which does not exist.",
        )
