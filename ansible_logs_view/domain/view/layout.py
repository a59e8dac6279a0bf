"""Screen split between the task list and the details panel."""

from dataclasses import dataclass

from ansible_logs_view.config import LayoutConfig

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24


@dataclass(frozen=True)
class Layout:
    """Panel sizes for one terminal size.

    Attributes:
        width: Width available to both panels.
        list_height: Rows of the task list (the navigation viewport).
        details_height: Rows of the whole details panel.
        details_text_height: Rows of scrollable text inside the details panel.
    """

    width: int
    list_height: int
    details_height: int
    details_text_height: int


def compute_layout(width: int, height: int, config: LayoutConfig | None = None) -> Layout:
    """Split the terminal between the list and details panels.

    The details panel takes its minimum height or a third of the space,
    whichever is larger, unless that would push the list below its own
    minimum; the details panel then shrinks, down to its floor.
    """
    config = config or LayoutConfig()
    base = height - config.header_height - config.help_height - config.vertical_padding

    details = config.details_min_height
    if base // 3 > details:
        details = base // 3

    nodes = base - details
    if nodes < config.list_min_height:
        nodes = config.list_min_height
        details = base - config.list_min_height
        if details < config.details_floor_height:
            details = config.details_floor_height
            nodes = base - details

    return Layout(
        width=max(0, width - config.horizontal_padding),
        list_height=max(1, nodes),
        details_height=max(0, details),
        details_text_height=max(0, details - config.details_chrome_height),
    )
