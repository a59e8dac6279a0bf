"""Infrastructure layer: file I/O around the pure domain.

Exports:
    - LogSource / read_log_lines: whole-file log reading returning Results
    - FileSink / create_sink: append-only diagnostic log for --debug runs
"""

from ansible_logs_view.infrastructure.diagnostics import FileSink, create_sink
from ansible_logs_view.infrastructure.log_source import LogSource, read_log_lines

__all__ = [
    "LogSource",
    "read_log_lines",
    "FileSink",
    "create_sink",
]
