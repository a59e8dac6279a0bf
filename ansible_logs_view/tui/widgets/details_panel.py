"""Details panel widget: the raw text of the selected task."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from ansible_logs_view.domain.view.render import NO_SELECTION_TEXT


class DetailsPanel(Static):
    """Bordered panel showing a scrolled window of the selected task's text."""

    DEFAULT_CSS = """
    DetailsPanel {
        border: solid #25A065;
        border-title-color: #FFFDF5;
        border-title-background: #25A065;
        padding: 1 2;
        height: auto;
    }
    """

    def __init__(self, id: Optional[str] = None, classes: Optional[str] = None) -> None:
        super().__init__(NO_SELECTION_TEXT, id=id, classes=classes)
        self.border_title = "Details"
        self._shown_text = NO_SELECTION_TEXT

    def show_text(self, content: str) -> None:
        # Text() keeps square brackets in log lines from being read as markup
        self._shown_text = content
        self.update(Text(content))

    @property
    def shown_text(self) -> str:
        return self._shown_text
