"""Failures that stop a log from being loaded.

These are returned inside ``Err`` rather than raised. Anything that goes
wrong inside a single task block (a bad timestamp, an unrecognized line)
is absorbed by the parser and never shows up here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LogError:
    """Base class for load failures."""

    path: str

    @property
    def message(self) -> str:
        return f"Cannot load {self.path}"


@dataclass(frozen=True)
class FileOpenError(LogError):
    """The log file could not be opened (missing, directory, permissions)."""

    reason: str = ""

    @property
    def message(self) -> str:
        return f"Error opening file {self.path}: {self.reason}"


@dataclass(frozen=True)
class FileReadError(LogError):
    """The log file was opened but reading it failed."""

    reason: str = ""

    @property
    def message(self) -> str:
        return f"Error reading file {self.path}: {self.reason}"


@dataclass(frozen=True)
class EmptyResultError(LogError):
    """The file was read but contained no task headers."""

    @property
    def message(self) -> str:
        return f"No tasks found in the log file {self.path}"
