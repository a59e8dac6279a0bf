"""Line-by-line parser for Ansible run logs.

The parser is a small state machine:

    SEEKING  -- task header -->  IN_TASK  -- "--- before" -->  IN_DIFF
                                   ^                             |
                                   +-- blank / header / status --+

Each state has its own transition method. A line that ends a diff block
is handed back to the IN_TASK rules, so a header or status line that
closes a diff still opens its task or sets its status.

All functions here are pure apart from the diagnostic sink: identical
input yields an identical task list.
"""

import re
from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from ansible_logs_view.domain.log.models import (
    DATETIME_FORMAT,
    Task,
    TaskBuilder,
    TaskStatus,
)
from ansible_logs_view.domain.shared.diagnostics import DiagnosticSink, NullSink

TASK_HEADER_RE = re.compile(r"^TASK \[(?P<name>.*)\] \*+\s*$")
DIFF_START_RE = re.compile(r"^--- before(?::|\s|$)")
PATH_RE = re.compile(r"task path: (?P<path>.*)")
# Tuesday 28 October 2025  02:05:23 +0100 (0:00:00.045) ...
TIMESTAMP_RE = re.compile(
    r"^(?P<weekday>\w+) (?P<day>\d+) (?P<month>\w+) (?P<year>\d+)  "
    r"(?P<hour>\d+):(?P<minute>\d+):(?P<second>\d+)"
)
STARTED_RE = re.compile(r"\[started TASK: (?P<name>.*?) on (?P<host>.*?)\]")
STATUS_RE = re.compile(r"^(?P<status>ok|changed|skipping|failed|fatal): \[(?P<host>.*?)\]")

MONTHS = {
    "January": "01",
    "February": "02",
    "March": "03",
    "April": "04",
    "May": "05",
    "June": "06",
    "July": "07",
    "August": "08",
    "September": "09",
    "October": "10",
    "November": "11",
    "December": "12",
}

RAW_PREVIEW_CHARS = 100


def strip_line_terminator(line: str) -> str:
    """Drop one trailing newline and then one trailing carriage return.

    Any other control character (form feed, a lone ``\\r`` inside the line)
    is part of the line.
    """
    return line.removesuffix("\n").removesuffix("\r")


def split_log_lines(content: str) -> list[str]:
    """Split file content on ``\\n`` only, like a line scanner would.

    The empty piece after a final newline is not a line.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class ParserState(str, Enum):
    """Where the parser is within the log."""

    SEEKING = "seeking"
    IN_TASK = "in-task"
    IN_DIFF = "in-diff"


def parse_timestamp(match: re.Match[str]) -> datetime | None:
    """Build a datetime from a TIMESTAMP_RE match.

    Unknown month names fall back to January. Returns None when the
    normalized string is not a valid date (e.g. day 31 in April).
    """
    month = MONTHS.get(match["month"], "01")
    normalized = (
        f"{match['year']}-{month}-{int(match['day']):02d} "
        f"{int(match['hour']):02d}:{int(match['minute']):02d}:{int(match['second']):02d}"
    )
    try:
        return datetime.strptime(normalized, DATETIME_FORMAT)
    except ValueError:
        return None


class LogParser:
    """Turns raw log lines into Task records.

    Example:
        parser = LogParser()
        tasks = parser.parse(path.read_text().splitlines())
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self._sink: DiagnosticSink = sink or NullSink()
        self._reset()

    def _reset(self) -> None:
        self._state = ParserState.SEEKING
        self._tasks: list[Task] = []
        self._current: TaskBuilder | None = None
        self._diff_lines: list[str] = []
        self._next_id = 1

    @property
    def state(self) -> ParserState:
        return self._state

    def parse(self, lines: Iterable[str]) -> list[Task]:
        """Parse a complete log and return its tasks in file order.

        Args:
            lines: Log lines, with or without trailing newlines.

        Returns:
            Tasks with IDs 1..N in the order their headers appear.
        """
        self._reset()
        handlers = {
            ParserState.SEEKING: self._on_seeking,
            ParserState.IN_TASK: self._on_task_line,
            ParserState.IN_DIFF: self._on_diff_line,
        }
        for line in lines:
            handlers[self._state](strip_line_terminator(line))
        self._finish_task()
        self._state = ParserState.SEEKING
        return list(self._tasks)

    # =========================================================================
    # State transitions
    # =========================================================================

    def _on_seeking(self, line: str) -> None:
        match = TASK_HEADER_RE.match(line)
        if match:
            self._open_task(match, line)

    def _on_task_line(self, line: str) -> None:
        header = TASK_HEADER_RE.match(line)
        if header:
            self._finish_task()
            self._open_task(header, line)
            return

        task = self._open_builder()
        task.raw_lines.append(line)

        if DIFF_START_RE.match(line):
            self._state = ParserState.IN_DIFF
            self._diff_lines = [line]
            return

        match = PATH_RE.search(line)
        if match:
            task.path = match["path"]
            return

        match = TIMESTAMP_RE.match(line)
        if match:
            parsed = parse_timestamp(match)
            if parsed is not None:
                task.start_time = parsed
            return

        match = STARTED_RE.search(line)
        if match:
            task.host = match["host"]
            return

        match = STATUS_RE.match(line)
        if match:
            task.status = TaskStatus(match["status"])
            task.host = match["host"]

    def _on_diff_line(self, line: str) -> None:
        if not line.strip() or TASK_HEADER_RE.match(line) or STATUS_RE.match(line):
            self._close_diff()
            self._state = ParserState.IN_TASK
            self._on_task_line(line)
            return

        self._open_builder().raw_lines.append(line)
        self._diff_lines.append(line)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _open_builder(self) -> TaskBuilder:
        if self._current is None:
            raise RuntimeError(f"No task is open in state {self._state.value}")
        return self._current

    def _open_task(self, match: re.Match[str], line: str) -> None:
        self._current = TaskBuilder(
            id=self._next_id,
            description=match["name"].strip(),
            raw_lines=[line],
        )
        self._next_id += 1
        self._state = ParserState.IN_TASK

    def _close_diff(self) -> None:
        if self._current is not None:
            self._current.add_diff_block(self._diff_lines)
        self._diff_lines = []

    def _finish_task(self) -> None:
        if self._current is None:
            return
        self._close_diff()
        task = self._current.build()
        self._current = None
        self._tasks.append(task)
        self._record(task)

    def _record(self, task: Task) -> None:
        preview = task.raw_text
        if len(preview) > RAW_PREVIEW_CHARS:
            preview = preview[:RAW_PREVIEW_CHARS] + "..."
        self._sink.record(
            f"Task ID: {task.id} | Description: {task.description} | "
            f"Status: {task.status.value} | Host: {task.host} | Path: {task.path} | "
            f"StartTime: {task.formatted_start() or '-'} | Diff: {len(task.diff)} chars | "
            f"RawText: {preview!r}"
        )


def parse_lines(lines: Iterable[str], sink: DiagnosticSink | None = None) -> list[Task]:
    """Convenience wrapper around ``LogParser(sink).parse(lines)``."""
    return LogParser(sink).parse(lines)
