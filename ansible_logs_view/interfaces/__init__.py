"""Outer interfaces of ansible-logs-view.

Subpackages:
    cli - Typer command-line application (``view``, ``tasks``, ``config``)
"""
