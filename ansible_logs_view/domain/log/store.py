"""Immutable, ordered collection of parsed tasks."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from ansible_logs_view.domain.log.models import Task


@dataclass(frozen=True)
class TaskStore:
    """All tasks of one log in file order, addressable by ID.

    Example:
        store = TaskStore.from_tasks(parse_lines(lines))
        first = store.get(1)
    """

    tasks: tuple[Task, ...] = ()
    _by_id: dict[int, Task] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_tasks(cls, tasks: Sequence[Task]) -> "TaskStore":
        ordered = tuple(tasks)
        ids = [task.id for task in ordered]
        if any(later <= earlier for earlier, later in zip(ids, ids[1:])):
            raise ValueError("Task IDs must be strictly increasing in file order")
        return cls(tasks=ordered, _by_id={task.id: task for task in ordered})

    def get(self, task_id: int) -> Task | None:
        return self._by_id.get(task_id)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __bool__(self) -> bool:
        return len(self.tasks) > 0
