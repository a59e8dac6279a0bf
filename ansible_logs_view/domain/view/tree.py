"""Expandable node model over the filtered task list.

Expansion state is stored per Task ID, never per list position, so a
task that is filtered out and later shown again comes back with the
expansion it had. (Earlier versions of the viewer kept the flag on the
positional node and lost it on every re-filter.)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from ansible_logs_view.domain.log.models import Task

# Host, path, start time and status lines shown under an expanded task
DEFAULT_DETAIL_ROWS = 4


@dataclass
class Node:
    """A task with its display expansion state."""

    task: Task
    is_expanded: bool = False
    children: list["Node"] = field(default_factory=list)

    @property
    def task_id(self) -> int:
        return self.task.id


@dataclass(frozen=True)
class FlatNode:
    """A node placed in the render order, with its nesting depth."""

    node: Node
    depth: int = 0


def flatten(nodes: Sequence[Node], depth: int = 0) -> list[FlatNode]:
    """Pre-order traversal of ``nodes`` into render order.

    Children of a collapsed node are skipped. Every node of the current
    log view is a root without children, so all depths are 0.
    """
    flat: list[FlatNode] = []
    for node in nodes:
        flat.append(FlatNode(node=node, depth=depth))
        if node.is_expanded and node.children:
            flat.extend(flatten(node.children, depth + 1))
    return flat


class TreeModel:
    """Nodes for the current filtered tasks plus their flattened order.

    Attributes:
        nodes: One Node per filtered task, in task order.
        flat: Render-ready sequence produced by ``flatten``.
        expanded_count: Expanded nodes present in ``flat``; recomputed on
            every rebuild and never updated on its own.
    """

    def __init__(self, detail_rows: int = DEFAULT_DETAIL_ROWS) -> None:
        self.detail_rows = detail_rows
        self._expanded: dict[int, bool] = {}
        self._tasks: list[Task] = []
        self.nodes: list[Node] = []
        self.flat: list[FlatNode] = []
        self.expanded_count = 0

    def rebuild(self, tasks: Sequence[Task]) -> None:
        """Wrap ``tasks`` as Nodes and recompute the flat sequence."""
        self._tasks = list(tasks)
        self.nodes = [
            Node(task=task, is_expanded=self._expanded.get(task.id, False))
            for task in self._tasks
        ]
        self.flat = flatten(self.nodes)
        self.expanded_count = sum(1 for flat_node in self.flat if flat_node.node.is_expanded)

    def is_expanded(self, task_id: int) -> bool:
        return self._expanded.get(task_id, False)

    def toggle(self, task_id: int) -> bool:
        """Flip expansion of ``task_id`` and rebuild; return the new state."""
        expanded = not self._expanded.get(task_id, False)
        self._expanded[task_id] = expanded
        self.rebuild(self._tasks)
        return expanded

    def row_height(self, flat_node: FlatNode) -> int:
        """Rendered rows taken by ``flat_node`` (header plus details)."""
        if flat_node.node.is_expanded:
            return 1 + self.detail_rows
        return 1

    def row_of(self, index: int) -> int:
        """First rendered row of the flat node at ``index``."""
        return sum(self.row_height(flat_node) for flat_node in self.flat[:index])

    @property
    def total_rows(self) -> int:
        return sum(self.row_height(flat_node) for flat_node in self.flat)

    def __len__(self) -> int:
        return len(self.flat)
