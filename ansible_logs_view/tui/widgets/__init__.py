"""TUI widgets for ansible-logs-view."""

from .details_panel import DetailsPanel
from .filter_bar import FilterBar, FilterCancelled
from .node_list import NodeListPanel

__all__ = [
    "NodeListPanel",
    "DetailsPanel",
    "FilterBar",
    "FilterCancelled",
]
