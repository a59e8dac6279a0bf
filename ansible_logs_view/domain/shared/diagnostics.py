"""Diagnostic sink port.

The parser and the viewer session report what they do through a single
``record`` call. Normal runs inject ``NullSink``; ``--debug`` runs inject
the file-backed sink from ``ansible_logs_view.infrastructure.diagnostics``.
"""

from typing import Protocol


class DiagnosticSink(Protocol):
    """Receives one formatted diagnostic line at a time."""

    def record(self, message: str) -> None: ...


class NullSink:
    """Sink that drops everything."""

    def record(self, message: str) -> None:
        return None
