"""ansible-logs-view CLI.

Re-exports the Typer app from ansible_logs_view.interfaces.cli so the
package can be run with ``python -m ansible_logs_view.cli``.
"""

from ansible_logs_view.interfaces.cli import app
from ansible_logs_view.interfaces.cli.main import main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()
