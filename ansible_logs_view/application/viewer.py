"""Viewer session service.

``LogViewer`` is the one model instance behind the TUI: it owns the task
store, the navigation controller, filter-mode state and the details
scroll position, and applies interaction intents one at a time.
"""

from functools import singledispatchmethod
from pathlib import Path

from ansible_logs_view.application.intents import (
    NAVIGATION_INTENTS,
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
from ansible_logs_view.config import ViewerConfig
from ansible_logs_view.domain.log.errors import EmptyResultError, LogError
from ansible_logs_view.domain.log.filtering import FilterEngine
from ansible_logs_view.domain.log.models import Task
from ansible_logs_view.domain.log.parser import LogParser
from ansible_logs_view.domain.log.store import TaskStore
from ansible_logs_view.domain.shared.diagnostics import DiagnosticSink, NullSink
from ansible_logs_view.domain.shared.result import Err, Ok, Result
from ansible_logs_view.domain.view.navigation import NavigationController, clamp
from ansible_logs_view.domain.view.render import (
    ListRow,
    list_rows,
    render_details,
    render_node_list,
)
from ansible_logs_view.domain.view.tree import TreeModel
from ansible_logs_view.infrastructure.log_source import LogSource


class LogViewer:
    """Navigable, filterable view over one parsed log.

    Example:
        viewer = LogViewer(store)
        viewer.handle(Resize(120, 40))
        viewer.handle(MoveDown())
        print(viewer.render_details())
    """

    def __init__(
        self,
        store: TaskStore,
        config: ViewerConfig | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.config = config or ViewerConfig()
        self.sink: DiagnosticSink = sink or NullSink()
        engine = FilterEngine.create(
            fuzzy=self.config.fuzzy,
            full_content=self.config.full_content_search,
        )
        self.nav = NavigationController(
            store,
            engine=engine,
            tree=TreeModel(detail_rows=self.config.detail_rows),
            layout_config=self.config.layout,
        )
        self.filter_mode = False
        self.filter_term = ""
        self.detail_offset = 0
        self.quitting = False
        self.sink.record(f"LogViewer() - {len(store)} tasks loaded")

    @property
    def store(self) -> TaskStore:
        return self.nav.store

    # =========================================================================
    # Intent dispatch
    # =========================================================================

    def handle(self, intent: Intent) -> None:
        """Apply one intent.

        Navigation intents are ignored while the filter input is open.

        Raises:
            TypeError: For an intent type the session does not know.
        """
        if self.filter_mode and isinstance(intent, NAVIGATION_INTENTS):
            self.sink.record(f"handle() - ignoring {type(intent).__name__} in filter mode")
            return

        before = self._selected_id()
        self._apply(intent)
        if self._selected_id() != before:
            self.detail_offset = 0

        self.sink.record(
            f"handle({type(intent).__name__}) - selected: {self.nav.selected}, "
            f"offset: {self.nav.offset}, height: {self.nav.viewport_height}, "
            f"expanded: {self.nav.expanded_count}, visible: {len(self.nav.flat)}"
        )

    def _selected_id(self) -> int | None:
        task = self.nav.selected_task()
        return task.id if task else None

    @singledispatchmethod
    def _apply(self, intent: Intent) -> None:
        raise TypeError(f"Unsupported intent: {intent!r}")

    @_apply.register
    def _move_up(self, intent: MoveUp) -> None:
        self.nav.move_up()

    @_apply.register
    def _move_down(self, intent: MoveDown) -> None:
        self.nav.move_down()

    @_apply.register
    def _go_top(self, intent: GoTop) -> None:
        self.nav.go_to_top()

    @_apply.register
    def _go_bottom(self, intent: GoBottom) -> None:
        self.nav.go_to_bottom()

    @_apply.register
    def _toggle_expand(self, intent: ToggleExpand) -> None:
        self.nav.toggle_expand()

    @_apply.register
    def _enter_filter_mode(self, intent: EnterFilterMode) -> None:
        self.filter_mode = True

    @_apply.register
    def _update_filter_term(self, intent: UpdateFilterTerm) -> None:
        if not self.filter_mode:
            return
        self.filter_term = intent.term
        self._apply_filter(intent.term)

    @_apply.register
    def _commit_filter(self, intent: CommitFilter) -> None:
        if not self.filter_mode:
            return
        self.filter_mode = False
        self._apply_filter(self.filter_term)

    @_apply.register
    def _cancel_filter(self, intent: CancelFilter) -> None:
        if not self.filter_mode:
            return
        self.filter_mode = False
        self.filter_term = ""
        self._apply_filter("")

    def _apply_filter(self, term: str) -> None:
        self.nav.apply_filter(term)
        self.detail_offset = 0

    @_apply.register
    def _scroll_detail_up(self, intent: ScrollDetailUp) -> None:
        self.detail_offset = clamp(self.detail_offset - intent.lines, 0, self.max_detail_offset)

    @_apply.register
    def _scroll_detail_down(self, intent: ScrollDetailDown) -> None:
        self.detail_offset = clamp(self.detail_offset + intent.lines, 0, self.max_detail_offset)

    @_apply.register
    def _resize(self, intent: Resize) -> None:
        self.nav.resize(intent.width, intent.height)
        self.detail_offset = clamp(self.detail_offset, 0, self.max_detail_offset)

    @_apply.register
    def _quit(self, intent: Quit) -> None:
        self.quitting = True

    # =========================================================================
    # Rendering
    # =========================================================================

    def selected_task(self) -> Task | None:
        return self.nav.selected_task()

    def list_rows(self) -> list[ListRow]:
        """Every row of the list panel, with the selected header flagged."""
        return list_rows(self.nav.flat, self.nav.selected)

    def visible_list_rows(self) -> list[ListRow]:
        """Rows inside the list viewport."""
        start = self.nav.offset
        return self.list_rows()[start : start + self.nav.viewport_height]

    def render_node_list(self) -> str:
        return render_node_list(self.nav.flat)

    def render_details(self) -> str:
        # Border and padding of the details panel take four columns
        width = max(0, self.nav.layout.width - 4) if self.config.wrap_details else 0
        return render_details(self.selected_task(), width)

    def detail_lines(self) -> list[str]:
        return self.render_details().split("\n")

    @property
    def max_detail_offset(self) -> int:
        return max(0, len(self.detail_lines()) - self.nav.layout.details_text_height)

    def visible_detail_text(self) -> str:
        """Details text starting at the current scroll position."""
        lines = self.detail_lines()
        height = max(1, self.nav.layout.details_text_height)
        return "\n".join(lines[self.detail_offset : self.detail_offset + height])


def load_session(
    path: Path,
    config: ViewerConfig | None = None,
    sink: DiagnosticSink | None = None,
    source: LogSource | None = None,
) -> Result[LogViewer, LogError]:
    """Read and parse ``path`` into a ready viewer session.

    Returns:
        Ok(LogViewer), or Err with FileOpenError / FileReadError for I/O
        failures and EmptyResultError when no task header was found.
    """
    sink = sink or NullSink()
    read = (source or LogSource()).read_lines(path)
    if isinstance(read, Err):
        sink.record(f"load_session() - {read.error.message}")
        return read

    tasks = LogParser(sink).parse(read.value)
    if not tasks:
        return Err(EmptyResultError(str(path)))

    return Ok(LogViewer(TaskStore.from_tasks(tasks), config=config, sink=sink))
