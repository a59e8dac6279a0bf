"""Keybinding help for the log viewer."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Label

KEY_HELP = [
    ("Navigation", [
        ("j / Down", "Move down"),
        ("k / Up", "Move up"),
        ("g / G", "Go to first / last task"),
        ("Enter / Space", "Expand or collapse the selected task"),
    ]),
    ("Details", [
        ("Ctrl+J / Ctrl+K", "Scroll details down / up"),
        ("PgDn / PgUp", "Scroll details by a page"),
    ]),
    ("Filter", [
        ("/", "Start filtering (applied as you type)"),
        ("Enter", "Keep the filter and close the input"),
        ("Escape", "Clear the filter"),
    ]),
    ("Application", [
        ("?", "Show this help"),
        ("q / Ctrl+C", "Quit"),
    ]),
]


class HelpModal(ModalScreen):
    """Modal dialog showing keybinding help."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("question_mark", "dismiss", "Close"),
    ]

    CSS = """
    HelpModal {
        align: center middle;
    }

    #help-modal {
        width: 64;
        height: auto;
        max-height: 30;
        border: thick #25A065;
        background: $surface;
        padding: 1 2;
    }

    #help-title {
        text-style: bold;
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    .help-section-title {
        text-style: bold;
        margin-top: 1;
    }

    .help-row {
        height: 1;
    }

    .help-key {
        width: 20;
        color: $warning;
    }
    """

    def compose(self) -> ComposeResult:
        with Container(id="help-modal"):
            yield Label("Ansible Logs TUI - Keyboard Shortcuts", id="help-title")
            for section, rows in KEY_HELP:
                yield Label(section, classes="help-section-title")
                for key, description in rows:
                    yield self._help_row(key, description)
            yield Label("")
            yield Label("Press Escape or ? to close", id="help-footer")

    def _help_row(self, key: str, description: str) -> Horizontal:
        return Horizontal(
            Label(f"  {key}", classes="help-key"),
            Label(description, classes="help-desc"),
            classes="help-row",
        )
