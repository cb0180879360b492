"""Diagnostics domain exports."""

from .diagnostic_collector import DiagnosticCollector, DiagnosticListener
from .diagnostic_records import Diagnostic, DiagnosticKind

__all__ = ["Diagnostic", "DiagnosticCollector", "DiagnosticKind", "DiagnosticListener"]
