"""Plain-text rendering of the list and details panels.

Output here carries no colors or terminal control sequences; the TUI
styles the rows it receives.
"""

import textwrap
from dataclasses import dataclass

from ansible_logs_view.domain.log.models import Task, TaskStatus
from ansible_logs_view.domain.view.tree import FlatNode

EMPTY_LIST_TEXT = "No nodes available."
NO_SELECTION_TEXT = "No node selected."
EXPANDED_MARKER = "▼"
COLLAPSED_MARKER = "▶"
DETAIL_INDENT = "    "

_ESCAPES = {"\\n": "\n", "\\t": "\t", '\\"': '"'}


@dataclass(frozen=True)
class ListRow:
    """One rendered line of the task list."""

    text: str
    task_id: int
    status: TaskStatus
    is_header: bool
    selected: bool = False


def node_header(flat_node: FlatNode) -> str:
    node = flat_node.node
    task = node.task
    marker = EXPANDED_MARKER if node.is_expanded else COLLAPSED_MARKER
    indent = "  " * flat_node.depth
    return f"{indent}{marker} [{task.id}] {task.description} - [{task.status.value.upper()}]"


def detail_lines(task: Task) -> list[str]:
    return [
        f"{DETAIL_INDENT}Host: {task.host}",
        f"{DETAIL_INDENT}Path: {task.path}",
        f"{DETAIL_INDENT}Start Time: {task.formatted_start()}",
        f"{DETAIL_INDENT}Status: {task.status.value}",
    ]


def list_rows(flat: list[FlatNode], selected: int = -1) -> list[ListRow]:
    """Every rendered row of the list, expanded details included."""
    rows: list[ListRow] = []
    for index, flat_node in enumerate(flat):
        task = flat_node.node.task
        rows.append(
            ListRow(
                text=node_header(flat_node),
                task_id=task.id,
                status=task.status,
                is_header=True,
                selected=index == selected,
            )
        )
        if flat_node.node.is_expanded:
            rows.extend(
                ListRow(text=line, task_id=task.id, status=task.status, is_header=False)
                for line in detail_lines(task)
            )
    return rows


def render_node_list(flat: list[FlatNode]) -> str:
    """The whole list panel as one newline-separated string."""
    if not flat:
        return EMPTY_LIST_TEXT
    return "\n".join(row.text for row in list_rows(flat))


def expand_escapes(text: str) -> str:
    """Turn literal ``\\n``, ``\\t`` and ``\\"`` sequences into characters.

    Ansible prints module output as JSON, so multi-line messages arrive
    with escaped newlines.
    """
    for escaped, char in _ESCAPES.items():
        text = text.replace(escaped, char)
    return text


def wrap_text(text: str, width: int) -> str:
    """Wrap each line to ``width`` columns, keeping blank lines."""
    if width <= 0:
        return text
    wrapped: list[str] = []
    for line in text.split("\n"):
        if not line.strip():
            wrapped.append(line)
            continue
        wrapped.extend(
            textwrap.wrap(
                line,
                width=width,
                replace_whitespace=False,
                drop_whitespace=False,
                break_on_hyphens=False,
            )
            or [line]
        )
    return "\n".join(wrapped)


def render_details(task: Task | None, width: int = 0) -> str:
    """Details panel text for the selected task.

    Args:
        task: Selected task, or None when the list is empty.
        width: Wrap width; 0 disables wrapping.
    """
    if task is None:
        return NO_SELECTION_TEXT
    content = f"Item: {task.description}\n\n{expand_escapes(task.raw_text)}"
    return wrap_text(content.rstrip("\n"), width)
