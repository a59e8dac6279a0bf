"""View domain: expandable nodes, navigation, layout and plain-text rendering."""

from ansible_logs_view.domain.view.layout import Layout, compute_layout
from ansible_logs_view.domain.view.navigation import NavigationController, clamp
from ansible_logs_view.domain.view.render import (
    ListRow,
    list_rows,
    render_details,
    render_node_list,
)
from ansible_logs_view.domain.view.tree import FlatNode, Node, TreeModel, flatten

__all__ = [
    "Node",
    "FlatNode",
    "TreeModel",
    "flatten",
    "NavigationController",
    "clamp",
    "Layout",
    "compute_layout",
    "ListRow",
    "list_rows",
    "render_node_list",
    "render_details",
]
