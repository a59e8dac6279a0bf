"""Selection and scrolling over the flattened task list.

Rows are counted in rendered lines: an expanded task takes its header
row plus its detail rows, so the row of flat index ``i`` is ``i`` plus
the detail rows of every expanded node before it. ``offset`` is the
first visible row.
"""

from ansible_logs_view.config import LayoutConfig
from ansible_logs_view.domain.log.filtering import FilterEngine
from ansible_logs_view.domain.log.models import Task
from ansible_logs_view.domain.log.store import TaskStore
from ansible_logs_view.domain.view.layout import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    Layout,
    compute_layout,
)
from ansible_logs_view.domain.view.tree import FlatNode, TreeModel


def clamp(value: int, low: int, high: int) -> int:
    """Clamp ``value`` into ``[low, max(low, high)]``."""
    return max(low, min(value, max(low, high)))


class NavigationController:
    """Owns the selected index, scroll offset and viewport height.

    Every operation is a no-op on an empty list.

    Example:
        nav = NavigationController(store, viewport_height=10)
        nav.move_down()
        nav.apply_filter("failed")
    """

    def __init__(
        self,
        store: TaskStore,
        engine: FilterEngine | None = None,
        tree: TreeModel | None = None,
        viewport_height: int | None = None,
        layout_config: LayoutConfig | None = None,
    ) -> None:
        self.store = store
        self.engine = engine or FilterEngine()
        self.tree = tree or TreeModel()
        self.layout_config = layout_config or LayoutConfig()
        self.layout: Layout = compute_layout(DEFAULT_WIDTH, DEFAULT_HEIGHT, self.layout_config)
        self.viewport_height = max(1, viewport_height or self.layout.list_height)
        self.term = ""
        self.filtered: list[Task] = list(store)
        self.selected = 0
        self.offset = 0
        self.tree.rebuild(self.filtered)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def flat(self) -> list[FlatNode]:
        return self.tree.flat

    @property
    def expanded_count(self) -> int:
        return self.tree.expanded_count

    @property
    def last_index(self) -> int:
        return max(0, len(self.flat) - 1)

    def selected_task(self) -> Task | None:
        if not self.flat:
            return None
        return self.flat[self.selected].node.task

    def visible_rows(self) -> range:
        """Rendered rows currently inside the viewport."""
        return range(self.offset, self.offset + self.viewport_height)

    # =========================================================================
    # Movement
    # =========================================================================

    def move_up(self) -> None:
        self._select(self.selected - 1)

    def move_down(self) -> None:
        self._select(self.selected + 1)

    def go_to_top(self) -> None:
        self._select(0)

    def go_to_bottom(self) -> None:
        self._select(self.last_index)

    def _select(self, index: int) -> None:
        if not self.flat:
            return
        self.selected = clamp(index, 0, self.last_index)
        self._reconcile_offset()

    # =========================================================================
    # Structural changes
    # =========================================================================

    def toggle_expand(self) -> bool | None:
        """Flip expansion of the selected task.

        Returns:
            The new expansion state, or None when nothing is selected.
        """
        task = self.selected_task()
        if task is None:
            return None
        expanded = self.tree.toggle(task.id)
        self.selected = clamp(self.selected, 0, self.last_index)
        self._reconcile_offset()
        return expanded

    def apply_filter(self, term: str) -> None:
        """Filter the full task list and return to the top."""
        self.term = term
        self.filtered = self.engine.apply(term, self.store)
        self.tree.rebuild(self.filtered)
        self.selected = 0
        self.offset = 0

    def resize(self, width: int, height: int) -> Layout:
        """Recompute the panel split for a new terminal size."""
        self.layout = compute_layout(width, height, self.layout_config)
        self.viewport_height = self.layout.list_height
        self.selected = clamp(self.selected, 0, self.last_index)
        self._reconcile_offset()
        return self.layout

    # =========================================================================
    # Offset arithmetic
    # =========================================================================

    def _reconcile_offset(self) -> None:
        """Scroll by the least amount that keeps the selection visible."""
        if not self.flat:
            self.offset = 0
            return

        top = self.tree.row_of(self.selected)
        block = min(self.tree.row_height(self.flat[self.selected]), self.viewport_height)
        bottom = top + block

        if top < self.offset:
            self.offset = top
        elif bottom > self.offset + self.viewport_height:
            self.offset = bottom - self.viewport_height

        self.offset = clamp(self.offset, 0, self.tree.total_rows - self.viewport_height)
