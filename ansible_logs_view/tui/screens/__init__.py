"""TUI screens for ansible-logs-view."""

from .help import HelpModal
from .main import LogViewerScreen

__all__ = [
    "LogViewerScreen",
    "HelpModal",
]
