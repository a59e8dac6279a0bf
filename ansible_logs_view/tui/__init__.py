"""Textual TUI for ansible-logs-view.

Modules:
    - app: LogViewerApp, key bindings mapped to viewer intents
    - screens: main list/details screen and the help modal
    - widgets: task list, details panel and filter bar

The TUI holds no navigation state of its own; it renders whatever the
LogViewer session reports after each intent.
"""
