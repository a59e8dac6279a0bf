"""Task list panel for the log viewer TUI."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from ansible_logs_view.domain.log.models import TaskStatus
from ansible_logs_view.domain.view.render import EMPTY_LIST_TEXT, ListRow

# Status tag colors
STATUS_STYLES = {
    TaskStatus.OK: "bold #FFFDF5 on #25A065",
    TaskStatus.CHANGED: "bold #FFFDF5 on #FFA500",
    TaskStatus.SKIPPING: "bold #FFFDF5 on #888888",
    TaskStatus.FAILED: "bold #FFFDF5 on #FF0000",
    TaskStatus.FATAL: "bold #FFFDF5 on #FF0000",
    TaskStatus.UNKNOWN: "bold #FFFDF5 on #888888",
}
SELECTED_STYLE = "bold #FFFFFF on #25A065"
DETAIL_STYLE = "#AAAAAA"


def style_row(row: ListRow) -> Text:
    """Turn one plain list row into styled text."""
    if not row.is_header:
        return Text(row.text, style=DETAIL_STYLE)
    if row.selected:
        return Text(row.text, style=SELECTED_STYLE)

    text = Text(row.text)
    tag = f"[{row.status.value.upper()}]"
    start = row.text.rfind(tag)
    if start >= 0:
        text.stylize(STATUS_STYLES.get(row.status, ""), start + 1, start + len(tag) - 1)
    return text


class NodeListPanel(Static):
    """Shows the rows of the task list that fall inside the viewport."""

    DEFAULT_CSS = """
    NodeListPanel {
        height: auto;
        padding: 0 2;
    }
    """

    def __init__(self, id: Optional[str] = None, classes: Optional[str] = None) -> None:
        super().__init__(EMPTY_LIST_TEXT, id=id, classes=classes)
        self._rows: list[ListRow] = []

    def show_rows(self, rows: list[ListRow]) -> None:
        """Replace the visible rows."""
        self._rows = rows
        if not rows:
            self.update(EMPTY_LIST_TEXT)
            return
        self.update(Text("\n").join(style_row(row) for row in rows))

    @property
    def rows(self) -> list[ListRow]:
        return list(self._rows)
