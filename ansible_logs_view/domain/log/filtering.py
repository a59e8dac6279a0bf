"""Search filtering over parsed tasks.

All functions in this module are pure - they never mutate the task list
they are given, and filtering an already filtered list with the same
term returns the same list.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from ansible_logs_view.domain.log.models import (
    DATE_FORMAT,
    DATETIME_FORMAT,
    TIME_FORMAT,
    Task,
)


class FilterMode(str, Enum):
    """How a search term is compared against task fields."""

    SUBSTRING = "substring"
    FUZZY = "fuzzy"


def substring_match(term: str, text: str) -> bool:
    """Case-insensitive containment."""
    return term.casefold() in text.casefold()


def fuzzy_match(term: str, text: str) -> bool:
    """True when every character of ``term`` appears in ``text`` in order.

    Matching is case-insensitive and characters need not be contiguous,
    so "cpfl" matches "Copy file".
    """
    remaining = iter(text.casefold())
    return all(char in remaining for char in term.casefold())


def searchable_fields(task: Task, full_content: bool = False) -> list[str]:
    """Field values a search term is tested against."""
    fields = [task.description, task.status.value, task.host, task.path]
    if task.start_time is not None:
        fields.extend(
            task.formatted_start(fmt) for fmt in (DATETIME_FORMAT, DATE_FORMAT, TIME_FORMAT)
        )
    if full_content:
        fields.extend([task.diff, task.raw_text])
    return fields


@dataclass(frozen=True)
class FilterEngine:
    """Derives the filtered task list for a search term.

    Attributes:
        mode: Substring (default) or in-order fuzzy matching.
        full_content: Also search the diff and raw text of each task.
    """

    mode: FilterMode = FilterMode.SUBSTRING
    full_content: bool = False

    @classmethod
    def create(cls, fuzzy: bool = False, full_content: bool = False) -> "FilterEngine":
        mode = FilterMode.FUZZY if fuzzy else FilterMode.SUBSTRING
        return cls(mode=mode, full_content=full_content)

    def _matcher(self) -> Callable[[str, str], bool]:
        if self.mode == FilterMode.FUZZY:
            return fuzzy_match
        return substring_match

    def matches(self, term: str, task: Task) -> bool:
        match = self._matcher()
        return any(match(term, value) for value in searchable_fields(task, self.full_content))

    def apply(self, term: str, tasks: Iterable[Task]) -> list[Task]:
        """Return the tasks matching ``term``, preserving order.

        Args:
            term: Search term; empty or whitespace-only keeps every task.
            tasks: Tasks to filter (left untouched).

        Returns:
            A new list holding the tasks where any searchable field matches.
        """
        if not term.strip():
            return list(tasks)
        if self.mode == FilterMode.FUZZY:
            term = term.strip()
        return [task for task in tasks if self.matches(term, task)]
