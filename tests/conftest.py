"""Shared fixtures for ansible-logs-view tests.

File handling in tests:
- Use tmp_path for any log, config or debug file so tests stay isolated.
- Use the ``home`` fixture whenever code under test reads the user config.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from ansible_logs_view.domain.log.models import Task, TaskStatus
from ansible_logs_view.domain.log.store import TaskStore

SAMPLE_LOG = """\
PLAY [all] *********************************************************************

TASK [Install pkg] *************************************************************
task path: /srv/playbooks/site.yml:5
Tuesday 28 October 2025  02:05:23 +0100 (0:00:00.045)       0:00:01.120 ******
ok: [hostA]

TASK [Copy file] ***************************************************************
task path: /srv/playbooks/site.yml:10
Tuesday 28 October 2025  02:05:24 +0100 (0:00:01.002)       0:00:02.122 ******
--- before: /etc/motd
+++ after: /etc/motd
@@ -1 +1 @@
-old
+new

changed: [hostB]

PLAY RECAP *********************************************************************
hostA                      : ok=1    changed=0    unreachable=0    failed=0
"""

SAMPLE_DIFF = (
    "--- before: /etc/motd\n"
    "+++ after: /etc/motd\n"
    "@@ -1 +1 @@\n"
    "-old\n"
    "+new"
)


def _make_task(
    id: int,
    description: str = "",
    status: TaskStatus = TaskStatus.OK,
    host: str = "web01",
    path: str = "",
    start_time: datetime | None = None,
    diff: str = "",
    raw_text: str = "",
) -> Task:
    description = description or f"Task {id}"
    return Task(
        id=id,
        description=description,
        status=status,
        host=host,
        path=path,
        start_time=start_time,
        diff=diff,
        raw_text=raw_text or f"TASK [{description}] ****\n",
    )


def _make_store(count: int) -> TaskStore:
    return TaskStore.from_tasks([_make_task(i) for i in range(1, count + 1)])


class RecordingSink:
    """Diagnostic sink that keeps every recorded line."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def record(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture
def make_task():
    """Factory for Task records with sensible defaults."""
    return _make_task


@pytest.fixture
def make_store():
    """Factory for a store of N plain tasks with IDs 1..N."""
    return _make_store


@pytest.fixture
def sample_diff() -> str:
    return SAMPLE_DIFF


@pytest.fixture
def sample_lines() -> list[str]:
    return SAMPLE_LOG.splitlines()


@pytest.fixture
def sample_log(tmp_path: Path) -> Path:
    """A small two-task log written to disk."""
    path = tmp_path / "site.log"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path


@pytest.fixture
def empty_log(tmp_path: Path) -> Path:
    """A log without any task header."""
    path = tmp_path / "empty.log"
    path.write_text("PLAY [all] ****\n\nPLAY RECAP ****\n", encoding="utf-8")
    return path


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user home (and so the config dir) at a temp directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def store20() -> TaskStore:
    return _make_store(20)
