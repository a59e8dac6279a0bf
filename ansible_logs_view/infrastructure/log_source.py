"""Whole-file reading of Ansible logs with Result-based error handling.

The file is read completely before the viewer starts: task boundaries
are only known once the next header has been seen, so the parser is
given the full line list rather than a stream.
"""

import logging
from pathlib import Path

from ansible_logs_view.domain.log.errors import FileOpenError, FileReadError, LogError
from ansible_logs_view.domain.log.parser import split_log_lines
from ansible_logs_view.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class LogSource:
    """Reads a log file into memory.

    Example:
        result = LogSource().read_lines(Path("ansible.log"))
        if isinstance(result, Ok):
            lines = result.value
        else:
            print(result.error.message)
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_lines(self, path: Path) -> Result[list[str], LogError]:
        """Read every ``\\n``-separated line of ``path`` without terminators.

        Args:
            path: Log file to read.

        Returns:
            Ok(lines) on success, Err(FileOpenError) when the file cannot be
            opened, Err(FileReadError) when reading it fails.
        """
        try:
            handle = path.open("r", encoding=self.encoding, errors="replace", newline="")
        except FileNotFoundError:
            return Err(FileOpenError(str(path), "no such file"))
        except IsADirectoryError:
            return Err(FileOpenError(str(path), "is a directory"))
        except PermissionError:
            return Err(FileOpenError(str(path), "permission denied"))
        except OSError as e:
            return Err(FileOpenError(str(path), e.strerror or str(e)))

        with handle:
            try:
                lines = split_log_lines(handle.read())
            except OSError as e:
                return Err(FileReadError(str(path), e.strerror or str(e)))

        logger.debug(f"Read {len(lines)} lines from {path}")
        return Ok(lines)


def read_log_lines(path: Path) -> Result[list[str], LogError]:
    """Read ``path`` with the default UTF-8 source."""
    return LogSource().read_lines(path)
