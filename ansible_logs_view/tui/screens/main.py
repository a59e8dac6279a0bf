"""Main screen for the log viewer TUI.

Layout:
+------------------------------------------------+
| Header: Ansible Logs TUI                       |
| [filter input, only while filtering]           |
| Task list (viewport over the flattened tasks)  |
| +- Details ----------------------------------+ |
| | raw text of the selected task              | |
| +--------------------------------------------+ |
| Footer with keybindings                        |
+------------------------------------------------+
"""

from typing import TYPE_CHECKING

from textual import events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header, Input

from ansible_logs_view.application.intents import (
    CancelFilter,
    CommitFilter,
    Resize,
    UpdateFilterTerm,
)
from ansible_logs_view.tui.widgets import (
    DetailsPanel,
    FilterBar,
    FilterCancelled,
    NodeListPanel,
)

if TYPE_CHECKING:
    from ansible_logs_view.tui.app import LogViewerApp


class LogViewerScreen(Screen):
    """Task list above a details panel, both driven by the LogViewer session."""

    AUTO_FOCUS = ""

    DEFAULT_CSS = """
    LogViewerScreen {
        layout: vertical;
    }

    #filter-bar {
        display: none;
    }

    #filter-bar.visible {
        display: block;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield FilterBar(id="filter-bar")
        yield NodeListPanel(id="node-list")
        yield DetailsPanel(id="details")
        yield Footer()

    @property
    def viewer_app(self) -> "LogViewerApp":
        return self.app  # type: ignore[return-value]

    def on_mount(self) -> None:
        size = self.app.size
        self.viewer_app.send_intent(Resize(size.width, size.height))

    def on_resize(self, event: events.Resize) -> None:
        self.viewer_app.send_intent(Resize(event.size.width, event.size.height))

    # =========================================================================
    # Filter bar
    # =========================================================================

    def open_filter(self) -> None:
        filter_bar = self.query_one("#filter-bar", FilterBar)
        filter_bar.add_class("visible")
        filter_bar.value = self.viewer_app.viewer.filter_term
        filter_bar.focus()

    def close_filter(self, clear: bool = False) -> None:
        filter_bar = self.query_one("#filter-bar", FilterBar)
        if clear:
            with filter_bar.prevent(Input.Changed):
                filter_bar.value = ""
        filter_bar.remove_class("visible")
        self.set_focus(None)

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if self.viewer_app.viewer.filter_mode:
            self.viewer_app.send_intent(UpdateFilterTerm(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.viewer_app.send_intent(CommitFilter())
        self.close_filter()

    def on_filter_cancelled(self, event: FilterCancelled) -> None:
        event.stop()
        self.viewer_app.send_intent(CancelFilter())
        self.close_filter(clear=True)

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_view(self) -> None:
        """Redraw both panels from the session state."""
        viewer = self.viewer_app.viewer
        layout = viewer.nav.layout

        node_list = self.query_one("#node-list", NodeListPanel)
        node_list.styles.height = layout.list_height
        node_list.show_rows(viewer.visible_list_rows())

        details = self.query_one("#details", DetailsPanel)
        details.styles.height = layout.details_height
        details.show_text(viewer.visible_detail_text())


__all__ = ["LogViewerScreen"]
