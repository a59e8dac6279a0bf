"""Tests for ansible_logs_view.application.viewer - the viewer session."""

from __future__ import annotations

import pytest

from ansible_logs_view.application.intents import (
    CancelFilter,
    CommitFilter,
    EnterFilterMode,
    GoBottom,
    GoTop,
    Intent,
    MoveDown,
    MoveUp,
    Quit,
    Resize,
    ScrollDetailDown,
    ScrollDetailUp,
    ToggleExpand,
    UpdateFilterTerm,
)
from ansible_logs_view.application.viewer import LogViewer, load_session
from ansible_logs_view.config import ViewerConfig
from ansible_logs_view.domain.log.errors import EmptyResultError, FileOpenError
from ansible_logs_view.domain.log.models import TaskStatus
from ansible_logs_view.domain.log.store import TaskStore
from ansible_logs_view.domain.shared.result import Err, Ok


@pytest.fixture
def viewer(store20) -> LogViewer:
    return LogViewer(store20)


@pytest.fixture
def long_viewer(make_task) -> LogViewer:
    """Viewer whose first task has 30 lines of raw text."""
    raw = "".join(f"line {n}\n" for n in range(30))
    store = TaskStore.from_tasks([make_task(1, "Verbose", raw_text=raw), make_task(2, "Short")])
    viewer = LogViewer(store)
    viewer.handle(Resize(80, 24))
    return viewer


class TestNavigationIntents:
    def test_move_and_jump(self, viewer):
        viewer.handle(MoveDown())
        viewer.handle(MoveDown())
        assert viewer.nav.selected == 2
        viewer.handle(MoveUp())
        assert viewer.nav.selected == 1
        viewer.handle(GoBottom())
        assert viewer.nav.selected == 19
        viewer.handle(GoTop())
        assert viewer.nav.selected == 0

    def test_toggle_expand(self, viewer):
        viewer.handle(ToggleExpand())
        assert viewer.nav.expanded_count == 1
        assert viewer.list_rows()[1].text == "    Host: web01"

    def test_unknown_intent_rejected(self, viewer):
        with pytest.raises(TypeError):
            viewer.handle(Intent())

    def test_unregistered_subclass_rejected(self, viewer):
        class Unregistered(Intent):
            pass

        with pytest.raises(TypeError, match="Unsupported intent"):
            viewer.handle(Unregistered())
        assert viewer.nav.selected == 0

    def test_scroll_and_resize_handlers_use_intent_fields(self, long_viewer):
        long_viewer.handle(ScrollDetailDown(5))
        assert long_viewer.detail_offset == 5
        long_viewer.handle(ScrollDetailUp(2))
        assert long_viewer.detail_offset == 3
        long_viewer.handle(Resize(100, 40))
        assert long_viewer.nav.layout.list_height == 18
        assert long_viewer.detail_offset == 3

    def test_quit(self, viewer):
        viewer.handle(Quit())
        assert viewer.quitting


class TestFilterMode:
    def test_live_filtering(self, make_task):
        store = TaskStore.from_tasks(
            [
                make_task(1, "Install pkg"),
                make_task(2, "Start service", TaskStatus.FAILED),
                make_task(3, "Copy file", TaskStatus.CHANGED),
            ]
        )
        viewer = LogViewer(store)
        viewer.handle(EnterFilterMode())
        viewer.handle(UpdateFilterTerm("fail"))
        assert viewer.filter_mode
        assert [row.task_id for row in viewer.list_rows()] == [2]

        viewer.handle(CommitFilter())
        assert not viewer.filter_mode
        assert viewer.filter_term == "fail"
        assert viewer.selected_task().id == 2

    def test_navigation_ignored_while_filtering(self, viewer):
        viewer.handle(EnterFilterMode())
        viewer.handle(MoveDown())
        viewer.handle(ToggleExpand())
        assert viewer.nav.selected == 0
        assert viewer.nav.expanded_count == 0

    def test_cancel_clears_filter(self, viewer):
        viewer.handle(EnterFilterMode())
        viewer.handle(UpdateFilterTerm("Task 7"))
        assert len(viewer.nav.flat) == 1
        viewer.handle(CancelFilter())
        assert not viewer.filter_mode
        assert viewer.filter_term == ""
        assert len(viewer.nav.flat) == 20

    def test_filter_intents_need_filter_mode(self, viewer):
        viewer.handle(UpdateFilterTerm("Task 7"))
        viewer.handle(CommitFilter())
        viewer.handle(CancelFilter())
        assert viewer.filter_term == ""
        assert len(viewer.nav.flat) == 20

    def test_filter_resets_selection(self, viewer):
        viewer.handle(GoBottom())
        viewer.handle(EnterFilterMode())
        viewer.handle(UpdateFilterTerm("Task"))
        assert (viewer.nav.selected, viewer.nav.offset) == (0, 0)

    def test_fuzzy_config(self, make_task):
        store = TaskStore.from_tasks([make_task(1, "Copy file"), make_task(2, "Install pkg")])
        viewer = LogViewer(store, config=ViewerConfig(fuzzy=True))
        viewer.handle(EnterFilterMode())
        viewer.handle(UpdateFilterTerm("cpfl"))
        assert [row.task_id for row in viewer.list_rows()] == [1]


class TestDetails:
    def test_details_follow_selection(self, viewer):
        viewer.handle(MoveDown())
        assert viewer.render_details().startswith("Item: Task 2\n\n")

    def test_empty_list_details(self, viewer):
        viewer.handle(EnterFilterMode())
        viewer.handle(UpdateFilterTerm("nothing matches this"))
        assert viewer.render_details() == "No node selected."
        assert viewer.visible_list_rows() == []

    def test_scroll_is_clamped(self, long_viewer):
        # "Item:" line, blank line, then 30 raw lines against 10 visible rows
        assert long_viewer.max_detail_offset == 22
        long_viewer.handle(ScrollDetailDown(lines=100))
        assert long_viewer.detail_offset == 22
        long_viewer.handle(ScrollDetailUp(lines=5))
        assert long_viewer.detail_offset == 17
        long_viewer.handle(ScrollDetailUp(lines=100))
        assert long_viewer.detail_offset == 0

    def test_visible_detail_window(self, long_viewer):
        long_viewer.handle(ScrollDetailDown(lines=2))
        text = long_viewer.visible_detail_text().split("\n")
        assert len(text) == 10
        assert text[0] == "line 0"

    def test_selection_change_resets_scroll(self, long_viewer):
        long_viewer.handle(ScrollDetailDown(lines=4))
        long_viewer.handle(MoveDown())
        assert long_viewer.detail_offset == 0

    def test_no_wrap_config(self, make_task):
        store = TaskStore.from_tasks([make_task(1, "Wide", raw_text="y" * 200 + "\n")])
        viewer = LogViewer(store, config=ViewerConfig(wrap_details=False))
        assert viewer.detail_lines()[-1] == "y" * 200
        wrapped = LogViewer(store)
        assert all(len(line) <= 72 for line in wrapped.detail_lines())


class TestViewport:
    def test_visible_rows_follow_offset(self, viewer):
        viewer.handle(Resize(80, 24))
        for _ in range(5):
            viewer.handle(MoveDown())
        rows = viewer.visible_list_rows()
        assert len(rows) == 3
        assert rows[-1].task_id == 6
        assert rows[-1].selected

    def test_resize_updates_layout(self, viewer):
        viewer.handle(Resize(120, 60))
        assert viewer.nav.layout.list_height == 36
        assert viewer.nav.viewport_height == 36


class TestDiagnostics:
    def test_intents_are_recorded(self, store20, sink):
        viewer = LogViewer(store20, sink=sink)
        viewer.handle(MoveDown())
        assert sink.lines[0] == "LogViewer() - 20 tasks loaded"
        assert sink.lines[-1].startswith("handle(MoveDown) - selected: 1, offset: 0")

    def test_ignored_intents_are_recorded(self, store20, sink):
        viewer = LogViewer(store20, sink=sink)
        viewer.handle(EnterFilterMode())
        viewer.handle(MoveDown())
        assert sink.lines[-1] == "handle() - ignoring MoveDown in filter mode"


class TestLoadSession:
    def test_loads_tasks(self, sample_log, sink):
        result = load_session(sample_log, sink=sink)
        assert isinstance(result, Ok)
        viewer = result.value
        assert len(viewer.store) == 2
        assert viewer.selected_task().description == "Install pkg"
        assert any(line.startswith("Task ID: 2") for line in sink.lines)

    def test_missing_file(self, tmp_path):
        result = load_session(tmp_path / "missing.log")
        assert isinstance(result, Err)
        assert isinstance(result.error, FileOpenError)

    def test_no_tasks(self, empty_log):
        result = load_session(empty_log)
        assert isinstance(result, Err)
        assert isinstance(result.error, EmptyResultError)
        assert result.error.message == f"No tasks found in the log file {empty_log}"

    def test_form_feed_does_not_open_a_task(self, tmp_path):
        path = tmp_path / "ff.log"
        path.write_bytes(b"TASK [a] ****\nmsg: x\x0cTASK [fake] ****\nok: [h1]\n")
        result = load_session(path)
        assert isinstance(result, Ok)
        assert len(result.value.store) == 1
        assert result.value.selected_task().status == TaskStatus.OK
