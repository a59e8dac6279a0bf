"""Log viewer TUI application.

LogViewerApp maps keys and terminal events to intents, hands them to the
LogViewer session one at a time and redraws the main screen afterwards.
All navigation and filtering state lives in the session, not in widgets.
"""

from textual.app import App
from textual.binding import Binding

from ansible_logs_view.application.intents import (
    EnterFilterMode,
    GoBottom,
    GoTop,
    Intent,
    MoveDown,
    MoveUp,
    Quit,
    ScrollDetailDown,
    ScrollDetailUp,
    ToggleExpand,
)
from ansible_logs_view.application.viewer import LogViewer
from ansible_logs_view.tui.screens import HelpModal, LogViewerScreen


class LogViewerApp(App):
    """Interactive browser for the tasks of one Ansible log."""

    TITLE = "Ansible Logs TUI"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        background: #25A065;
        color: #FFFDF5;
    }
    """

    BINDINGS = [
        Binding("j,down", "move_down", "Down", show=False),
        Binding("k,up", "move_up", "Up", show=False),
        Binding("g", "go_top", "Top", show=True),
        Binding("G", "go_bottom", "Bottom", show=True),
        Binding("enter,space", "toggle_expand", "Expand", show=True),
        Binding("slash", "filter", "Filter", show=True, key_display="/"),
        Binding("ctrl+k", "scroll_details_up", "Details up", show=False),
        Binding("ctrl+j", "scroll_details_down", "Details down", show=False),
        Binding("pageup", "page_details_up", "Details page up", show=False),
        Binding("pagedown", "page_details_down", "Details page down", show=False),
        Binding("question_mark", "show_help", "Help", show=True, key_display="?"),
        Binding("q", "quit_viewer", "Quit", show=True),
        Binding("ctrl+c", "quit_viewer", "Quit", show=False, priority=True),
    ]

    def __init__(self, viewer: LogViewer) -> None:
        super().__init__()
        self.viewer = viewer

    def on_mount(self) -> None:
        self.push_screen(LogViewerScreen())

    def send_intent(self, intent: Intent) -> None:
        """Apply ``intent`` to the session and redraw."""
        self.viewer.handle(intent)
        if self.viewer.quitting:
            self.exit(return_code=0)
            return
        self._refresh_screens()

    def _refresh_screens(self) -> None:
        for screen in self.screen_stack:
            if isinstance(screen, LogViewerScreen) and screen.is_mounted:
                screen.refresh_view()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_move_down(self) -> None:
        self.send_intent(MoveDown())

    def action_move_up(self) -> None:
        self.send_intent(MoveUp())

    def action_go_top(self) -> None:
        self.send_intent(GoTop())

    def action_go_bottom(self) -> None:
        self.send_intent(GoBottom())

    def action_toggle_expand(self) -> None:
        self.send_intent(ToggleExpand())

    def action_filter(self) -> None:
        self.send_intent(EnterFilterMode())
        if isinstance(self.screen, LogViewerScreen):
            self.screen.open_filter()

    def action_scroll_details_up(self) -> None:
        self.send_intent(ScrollDetailUp())

    def action_scroll_details_down(self) -> None:
        self.send_intent(ScrollDetailDown())

    def action_page_details_up(self) -> None:
        self.send_intent(ScrollDetailUp(lines=max(1, self.viewer.nav.layout.details_text_height)))

    def action_page_details_down(self) -> None:
        self.send_intent(ScrollDetailDown(lines=max(1, self.viewer.nav.layout.details_text_height)))

    def action_show_help(self) -> None:
        self.push_screen(HelpModal())

    def action_quit_viewer(self) -> None:
        self.send_intent(Quit())


def run_tui(viewer: LogViewer) -> int:
    """Run the viewer until the user quits.

    Returns:
        Exit code (0 for success, 130 when interrupted).
    """
    app = LogViewerApp(viewer)
    try:
        app.run()
    except KeyboardInterrupt:
        return 130
    return app.return_code or 0


__all__ = ["LogViewerApp", "run_tui"]
