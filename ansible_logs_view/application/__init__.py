"""Application layer: the viewer session that drives the TUI.

Example usage:
    >>> from ansible_logs_view.application import load_session, MoveDown
    >>> result = load_session(Path("site.log"))
    >>> if is_ok(result):
    ...     viewer = result.value
    ...     viewer.handle(MoveDown())
"""

from ansible_logs_view.application.intents import (
    CancelFilter,
    CommitFilter,
    EnterFilterMode,
    GoBottom,
    GoTop,
    Intent,
    MoveDown,
    MoveUp,
    Quit,
    Resize,
    ScrollDetailDown,
    ScrollDetailUp,
    ToggleExpand,
    UpdateFilterTerm,
)
from ansible_logs_view.application.viewer import LogViewer, load_session

__all__ = [
    "LogViewer",
    "load_session",
    # Intents
    "Intent",
    "MoveUp",
    "MoveDown",
    "GoTop",
    "GoBottom",
    "ToggleExpand",
    "EnterFilterMode",
    "UpdateFilterTerm",
    "CommitFilter",
    "CancelFilter",
    "ScrollDetailUp",
    "ScrollDetailDown",
    "Resize",
    "Quit",
]
