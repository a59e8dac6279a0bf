"""File-backed diagnostic sink.

Enabled with ``--debug``: every formatted line the parser and viewer
record is appended to ``debug.log`` with a date, time and microsecond
stamp. The sink owns a dedicated logger that does not propagate, so the
records never reach the terminal the TUI is drawing on.
"""

import logging
from datetime import datetime
from pathlib import Path

from ansible_logs_view.domain.shared.diagnostics import DiagnosticSink, NullSink

LOGGER_NAME = "ansible_logs_view.diagnostics"

logger = logging.getLogger(__name__)


class _MicrosecondFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created).strftime("%Y/%m/%d %H:%M:%S.%f")


class FileSink:
    """Appends diagnostic lines to a file through the logging module."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        self._handler.setFormatter(_MicrosecondFormatter("%(asctime)s %(message)s"))
        self._logger = logging.getLogger(f"{LOGGER_NAME}.{id(self)}")
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)

    def record(self, message: str) -> None:
        self._logger.debug(message)

    def close(self) -> None:
        self._logger.removeHandler(self._handler)
        self._handler.close()


def create_sink(enabled: bool, path: Path) -> DiagnosticSink:
    """Build the sink for this run.

    Falls back to a NullSink when the debug file cannot be opened; the
    viewer never depends on diagnostics working.
    """
    if not enabled:
        return NullSink()
    try:
        return FileSink(path)
    except OSError as e:
        logger.warning(f"Cannot open debug log {path}: {e}")
        return NullSink()
