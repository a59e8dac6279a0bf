"""Shared utilities for the CLI commands.

- Formatted output helpers (error, success, info, warning)
- Mapping of load failures to exit codes
- Task summary formatting for the ``tasks`` command
"""

from typing import Annotated, NoReturn, Optional

import typer

from ansible_logs_view.config import ViewerConfig
from ansible_logs_view.domain.log.errors import EmptyResultError, LogError
from ansible_logs_view.domain.log.models import Task

EXIT_IO_ERROR = 1
EXIT_EMPTY_LOG = 2

FuzzyOption = Annotated[Optional[bool], typer.Option(
    "--fuzzy/--substring",
    help="Match filter terms as in-order characters instead of substrings",
)]

FullContentOption = Annotated[Optional[bool], typer.Option(
    "--full-content/--fields-only",
    help="Also search diffs and raw task text when filtering",
)]


def print_error(msg: str) -> None:
    """Print a formatted error message to stderr."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_separator(char: str = "=", width: int = 60) -> None:
    typer.echo(char * width)


def exit_code_for(error: LogError) -> int:
    """Empty logs are a usage problem; everything else is an I/O failure."""
    if isinstance(error, EmptyResultError):
        return EXIT_EMPTY_LOG
    return EXIT_IO_ERROR


def fail(error: LogError) -> NoReturn:
    """Report a load failure and exit with its code.

    Raises:
        typer.Exit: Always.
    """
    print_error(error.message)
    raise typer.Exit(exit_code_for(error))


def apply_overrides(
    config: ViewerConfig,
    fuzzy: bool | None = None,
    full_content: bool | None = None,
    wrap: bool | None = None,
) -> ViewerConfig:
    """Return ``config`` with the options given on the command line applied."""
    updates = {
        "fuzzy": fuzzy,
        "full_content_search": full_content,
        "wrap_details": wrap,
    }
    return config.model_copy(update={k: v for k, v in updates.items() if v is not None})


def format_task_summary(task: Task) -> str:
    """One line per task: ``Task 3: 2025-10-28 02:05:23 - Copy file (changed)``."""
    start = task.formatted_start() or "-"
    return f"Task {task.id}: {start} - {task.description} ({task.status.value})"


__all__ = [
    "EXIT_IO_ERROR",
    "EXIT_EMPTY_LOG",
    "FuzzyOption",
    "FullContentOption",
    "print_error",
    "print_success",
    "print_info",
    "print_warning",
    "print_separator",
    "exit_code_for",
    "fail",
    "apply_overrides",
    "format_task_summary",
]
