"""Task records parsed from an Ansible run log.

Uses Pydantic for the finished, immutable record and a plain dataclass
for the record the parser is still filling in.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


class TaskStatus(str, Enum):
    """Outcome reported for a task in the log."""

    UNKNOWN = "unknown"
    OK = "ok"
    CHANGED = "changed"
    SKIPPING = "skipping"
    FAILED = "failed"
    FATAL = "fatal"


class Task(BaseModel):
    """One ``TASK [...]`` block of the log.

    ``start_time`` is None when no timestamp line was found or it could
    not be parsed. ``raw_text`` holds every source line of the block,
    header included, each terminated by a newline.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    description: str
    start_time: datetime | None = None
    status: TaskStatus = TaskStatus.UNKNOWN
    host: str = ""
    path: str = ""
    diff: str = ""
    raw_text: str = ""

    def formatted_start(self, fmt: str = DATETIME_FORMAT) -> str:
        """Render the start time, or an empty string when unknown."""
        if self.start_time is None:
            return ""
        return self.start_time.strftime(fmt)


@dataclass
class TaskBuilder:
    """The task currently being assembled by the parser.

    Only the parser holds a builder; it is turned into a frozen Task
    when the next header arrives or input ends.
    """

    id: int
    description: str
    start_time: datetime | None = None
    status: TaskStatus = TaskStatus.UNKNOWN
    host: str = ""
    path: str = ""
    diff_blocks: list[str] = field(default_factory=list)
    raw_lines: list[str] = field(default_factory=list)

    def add_diff_block(self, lines: list[str]) -> None:
        if lines:
            self.diff_blocks.append("\n".join(lines))

    def build(self) -> Task:
        return Task(
            id=self.id,
            description=self.description,
            start_time=self.start_time,
            status=self.status,
            host=self.host,
            path=self.path,
            diff="\n".join(self.diff_blocks),
            raw_text="".join(f"{line}\n" for line in self.raw_lines),
        )
