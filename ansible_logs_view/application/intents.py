"""Interaction intents understood by the viewer session.

Intents are independent of key bindings: the TUI maps keys and terminal
events to these immutable records and hands them to ``LogViewer.handle``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Intent:
    """Base class for all intents."""


@dataclass(frozen=True)
class MoveUp(Intent):
    pass


@dataclass(frozen=True)
class MoveDown(Intent):
    pass


@dataclass(frozen=True)
class GoTop(Intent):
    pass


@dataclass(frozen=True)
class GoBottom(Intent):
    pass


@dataclass(frozen=True)
class ToggleExpand(Intent):
    pass


@dataclass(frozen=True)
class EnterFilterMode(Intent):
    pass


@dataclass(frozen=True)
class UpdateFilterTerm(Intent):
    """The filter input changed; applied as the user types."""

    term: str


@dataclass(frozen=True)
class CommitFilter(Intent):
    pass


@dataclass(frozen=True)
class CancelFilter(Intent):
    pass


@dataclass(frozen=True)
class ScrollDetailUp(Intent):
    lines: int = 1


@dataclass(frozen=True)
class ScrollDetailDown(Intent):
    lines: int = 1


@dataclass(frozen=True)
class Resize(Intent):
    width: int
    height: int


@dataclass(frozen=True)
class Quit(Intent):
    pass


NAVIGATION_INTENTS = (MoveUp, MoveDown, GoTop, GoBottom, ToggleExpand)
