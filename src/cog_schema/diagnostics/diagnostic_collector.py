"""Accumulates diagnostics for one merge run."""

from __future__ import annotations

from collections.abc import Callable

from .diagnostic_records import Diagnostic, DiagnosticKind

DiagnosticListener = Callable[[Diagnostic], None]


class DiagnosticCollector:
    """Collects diagnostics in report order and derives the failed state."""

    def __init__(self, listener: DiagnosticListener | None = None) -> None:
        self._listener = listener
        self._diagnostics: list[Diagnostic] = []
        self._reported_once: set[tuple[DiagnosticKind, str]] = set()

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    @property
    def failed(self) -> bool:
        """Return True when at least one diagnostic was reported."""
        return bool(self._diagnostics)

    def report(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)
        if self._listener is not None:
            self._listener(diagnostic)

    def report_once(self, diagnostic: Diagnostic) -> None:
        """Report `diagnostic` unless one of the same kind and subject was already reported."""
        dedup_key = (diagnostic.kind, diagnostic.subject)
        if dedup_key in self._reported_once:
            return
        self._reported_once.add(dedup_key)
        self.report(diagnostic)

    def missing_type(self, type_name: str) -> None:
        self.report_once(Diagnostic.missing_type(type_name))

    def of_kind(self, kind: DiagnosticKind) -> tuple[Diagnostic, ...]:
        return tuple(diagnostic for diagnostic in self._diagnostics if diagnostic.kind == kind)
