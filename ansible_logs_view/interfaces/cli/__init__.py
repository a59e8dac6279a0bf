"""CLI interface for ansible-logs-view using Typer.

Usage:
    ansible-logs-view view site.log            # Browse the log in the TUI
    ansible-logs-view view site.log --debug    # ...and append diagnostics to debug.log
    ansible-logs-view tasks site.log -f failed # Print a task summary
    ansible-logs-view config --init            # Write the default config file

Exit codes: 0 on success, 1 when the log cannot be opened or read,
2 when it holds no tasks.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ansible_logs_view import __version__
from ansible_logs_view.application.viewer import load_session
from ansible_logs_view.config import CONFIG_FILE_NAME, get_config_dir, load_config, save_config
from ansible_logs_view.domain.log.errors import EmptyResultError
from ansible_logs_view.domain.log.filtering import FilterEngine
from ansible_logs_view.domain.log.parser import LogParser
from ansible_logs_view.domain.shared.result import Err
from ansible_logs_view.infrastructure.diagnostics import FileSink, create_sink
from ansible_logs_view.infrastructure.log_source import read_log_lines
from ansible_logs_view.interfaces.cli.common import (
    FullContentOption,
    FuzzyOption,
    apply_overrides,
    fail,
    format_task_summary,
    print_info,
    print_separator,
    print_success,
)

LogFileArgument = Annotated[Path, typer.Argument(help="Ansible log file to read")]

app = typer.Typer(
    name="ansible-logs-view",
    help="Browse Ansible run logs as structured, filterable tasks",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"ansible-logs-view version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """ansible-logs-view - navigate the tasks of an Ansible run log."""


@app.command("view")
def view(
    logfile: LogFileArgument,
    debug: bool = typer.Option(False, "--debug", help="Append diagnostics to the debug log"),
    fuzzy: FuzzyOption = None,
    full_content: FullContentOption = None,
    wrap: Optional[bool] = typer.Option(
        None, "--wrap/--no-wrap", help="Wrap the details panel to the terminal width"
    ),
) -> None:
    """Open the log in the interactive viewer."""
    config = apply_overrides(load_config(), fuzzy=fuzzy, full_content=full_content, wrap=wrap)
    sink = create_sink(debug, Path(config.debug_log))

    try:
        result = load_session(logfile, config=config, sink=sink)
        if isinstance(result, Err):
            fail(result.error)

        from ansible_logs_view.tui.app import run_tui

        code = run_tui(result.value)
    finally:
        if isinstance(sink, FileSink):
            sink.close()
    raise typer.Exit(code)


@app.command("tasks")
def tasks(
    logfile: LogFileArgument,
    term: str = typer.Option("", "--filter", "-f", help="Only show tasks matching this term"),
    fuzzy: FuzzyOption = None,
    full_content: FullContentOption = None,
    limit: int = typer.Option(0, "--limit", "-n", min=0, help="Show at most N tasks (0 = all)"),
) -> None:
    """Print one summary line per parsed task."""
    config = apply_overrides(load_config(), fuzzy=fuzzy, full_content=full_content)

    read = read_log_lines(logfile)
    if isinstance(read, Err):
        fail(read.error)

    parsed = LogParser().parse(read.value)
    if not parsed:
        fail(EmptyResultError(str(logfile)))

    engine = FilterEngine.create(fuzzy=config.fuzzy, full_content=config.full_content_search)
    matching = engine.apply(term, parsed)

    typer.echo(f"Found {len(matching)} tasks:")
    shown = matching[:limit] if limit else matching
    for task in shown:
        typer.echo(format_task_summary(task))
    if len(shown) < len(matching):
        typer.echo(f"... and {len(matching) - len(shown)} more tasks")


@app.command("config")
def config(
    init: bool = typer.Option(False, "--init", help="Write the current settings to the config file"),
) -> None:
    """Show the effective configuration."""
    current = load_config()
    if init:
        path = save_config(current)
        print_success(f"Wrote {path}")
        return

    print_info(f"Config file: {get_config_dir() / CONFIG_FILE_NAME}")
    print_separator()
    typer.echo(current.model_dump_json(indent=2))


__all__ = ["app"]
