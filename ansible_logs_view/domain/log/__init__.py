"""Log domain: task records, parsing, storage and filtering.

Example usage:
    >>> from ansible_logs_view.domain.log import parse_lines, FilterEngine
    >>> tasks = parse_lines(["TASK [Install pkg] ****", "ok: [hostA]"])
    >>> [task.host for task in FilterEngine().apply("install", tasks)]
    ['hostA']
"""

from ansible_logs_view.domain.log.errors import (
    EmptyResultError,
    FileOpenError,
    FileReadError,
    LogError,
)
from ansible_logs_view.domain.log.filtering import (
    FilterEngine,
    FilterMode,
    fuzzy_match,
    searchable_fields,
    substring_match,
)
from ansible_logs_view.domain.log.models import Task, TaskBuilder, TaskStatus
from ansible_logs_view.domain.log.parser import LogParser, ParserState, parse_lines
from ansible_logs_view.domain.log.store import TaskStore

__all__ = [
    # Models
    "Task",
    "TaskBuilder",
    "TaskStatus",
    "TaskStore",
    # Parsing
    "LogParser",
    "ParserState",
    "parse_lines",
    # Filtering
    "FilterEngine",
    "FilterMode",
    "fuzzy_match",
    "substring_match",
    "searchable_fields",
    # Errors
    "LogError",
    "FileOpenError",
    "FileReadError",
    "EmptyResultError",
]
