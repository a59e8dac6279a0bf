"""Entry point for the ansible-logs-view CLI.

Usage:
    python -m ansible_logs_view.interfaces.cli.main view site.log

Or via installed entry point:
    ansible-logs-view <command>
"""

from ansible_logs_view.interfaces.cli import app


def main() -> None:
    """Run the ansible-logs-view CLI application."""
    app()


if __name__ == "__main__":
    main()
