"""Filter input shown above the task list while filtering."""

from typing import Optional

from textual.binding import Binding
from textual.message import Message
from textual.widgets import Input


class FilterCancelled(Message):
    """Posted when the user leaves the filter bar with escape."""


class FilterBar(Input):
    """Single-line filter input; hidden until filter mode starts."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel filter", show=False),
    ]

    DEFAULT_CSS = """
    FilterBar {
        margin: 0 2;
    }
    """

    def __init__(self, id: Optional[str] = None, classes: Optional[str] = None) -> None:
        super().__init__(placeholder="Filter...", max_length=100, id=id, classes=classes)

    def action_cancel(self) -> None:
        self.post_message(FilterCancelled())
