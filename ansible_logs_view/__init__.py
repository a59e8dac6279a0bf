"""ansible-logs-view - browse Ansible run logs as structured, filterable tasks."""

__version__ = "0.3.0"
