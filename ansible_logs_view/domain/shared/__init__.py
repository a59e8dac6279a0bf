"""Shared domain building blocks.

Example usage:
    >>> from ansible_logs_view.domain.shared import Ok, Err, is_ok
    >>> is_ok(Ok(3))
    True
"""

from ansible_logs_view.domain.shared.diagnostics import DiagnosticSink, NullSink
from ansible_logs_view.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
    unwrap_or,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "unwrap_or",
    # Diagnostics port
    "DiagnosticSink",
    "NullSink",
]
