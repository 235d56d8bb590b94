"""Split-pane layout engine for split-ide."""

from .drag import DragSession, ratio_from_position
from .ids import IdGenerator
from .store import LayoutStore
from .tree import (
    check_invariants,
    count_leaves,
    find_node,
    find_parent,
    get_all_leaves,
    get_first_leaf,
    iter_nodes,
    map_tree,
    replace_node,
)

__all__ = [
    "LayoutStore",
    "DragSession",
    "IdGenerator",
    "ratio_from_position",
    "find_node",
    "find_parent",
    "replace_node",
    "map_tree",
    "count_leaves",
    "get_first_leaf",
    "get_all_leaves",
    "iter_nodes",
    "check_invariants",
]
