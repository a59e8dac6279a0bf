"""Result type for operations with expected failure modes.

Loading a log can fail in a handful of well-known ways (the file cannot be
opened, cannot be read, or holds no tasks). Those outcomes are returned as
values so callers decide how to report them:

    >>> result = read_log_lines(Path("run.log"))
    >>> if is_ok(result):
    ...     lines = result.value
    ... else:
    ...     print(result.error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True when ``result`` is an Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True when ``result`` is an Err."""
    return isinstance(result, Err)


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Return the Ok value, or ``default`` for an Err."""
    if isinstance(result, Ok):
        return result.value
    return default
