"""Pure functions over pane trees.

None of these functions modify their input. Functions that return a tree
rebuild only the path from the root to the changed node and share every
other subtree with the input.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterator, Optional

from ..config.defaults import MAX_RATIO, MIN_RATIO
from ..exceptions import LayoutError
from ..models.pane import Leaf, PaneNode, Split, is_direction


def iter_nodes(root: PaneNode) -> Iterator[PaneNode]:
    """Yield every node in pre-order (node, first subtree, second subtree)."""
    stack: list[PaneNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Split):
            stack.append(node.second)
            stack.append(node.first)


def find_node(root: PaneNode, node_id: str) -> Optional[PaneNode]:
    """Depth-first search by id."""
    for node in iter_nodes(root):
        if node.id == node_id:
            return node
    return None


def find_parent(root: PaneNode, node_id: str) -> Optional[Split]:
    """Return the Split whose direct child has ``node_id``.

    None when ``node_id`` is the root or is not in the tree.
    """
    for node in iter_nodes(root):
        if isinstance(node, Split) and node_id in node.child_ids():
            return node
    return None


def replace_node(root: PaneNode, node_id: str, replacement: PaneNode) -> PaneNode:
    """Return a tree with the subtree ``node_id`` swapped for ``replacement``.

    Returns ``root`` itself when ``node_id`` is not found.
    """
    parents: dict[int, Split] = {}
    stack: list[PaneNode] = [root]
    while stack:
        node = stack.pop()
        if node.id == node_id:
            break
        if isinstance(node, Split):
            parents[id(node.first)] = node
            parents[id(node.second)] = node
            stack.append(node.second)
            stack.append(node.first)
    else:
        return root

    # rebuild the path bottom-up
    new_node = replacement
    while node is not root:
        parent = parents[id(node)]
        if parent.first is node:
            new_node = replace(parent, first=new_node)
        else:
            new_node = replace(parent, second=new_node)
        node = parent
    return new_node


def map_tree(root: PaneNode, fn: Callable[[PaneNode], PaneNode]) -> PaneNode:
    """Apply ``fn`` to every node, pre-order.

    ``fn`` sees a node before its children. If its result is a Split, the
    children of that result are mapped in turn. Subtrees where ``fn``
    returned every node unchanged are reused as-is.
    """
    results: list[PaneNode] = []
    stack: list[tuple[PaneNode, bool]] = [(root, False)]
    while stack:
        node, children_mapped = stack.pop()
        if children_mapped:
            second = results.pop()
            first = results.pop()
            if first is node.first and second is node.second:
                results.append(node)
            else:
                results.append(replace(node, first=first, second=second))
            continue

        mapped = fn(node)
        if isinstance(mapped, Split):
            stack.append((mapped, True))
            stack.append((mapped.second, False))
            stack.append((mapped.first, False))
        else:
            results.append(mapped)
    return results[0]


def count_leaves(root: PaneNode) -> int:
    return sum(1 for node in iter_nodes(root) if isinstance(node, Leaf))


def get_first_leaf(root: PaneNode) -> Leaf:
    """Follow ``first`` links down to a Leaf."""
    node = root
    while isinstance(node, Split):
        node = node.first
    return node


def get_all_leaves(root: PaneNode) -> list[Leaf]:
    """Every Leaf, left to right."""
    return [node for node in iter_nodes(root) if isinstance(node, Leaf)]


def check_invariants(root: PaneNode, active_pane_id: str) -> None:
    """Raise LayoutError if the tree or the active pane id is inconsistent."""
    seen_ids: set[str] = set()
    seen_nodes: set[int] = set()
    leaf_ids: set[str] = set()

    stack: list[PaneNode] = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen_nodes:
            raise LayoutError(f"Node {node.id!r} appears more than once")
        seen_nodes.add(id(node))

        if node.id in seen_ids:
            raise LayoutError(f"Duplicate node id {node.id!r}")
        seen_ids.add(node.id)

        if isinstance(node, Leaf):
            leaf_ids.add(node.id)
        elif isinstance(node, Split):
            if not is_direction(node.direction):
                raise LayoutError(f"Split {node.id!r} has direction {node.direction!r}")
            if not MIN_RATIO <= node.ratio <= MAX_RATIO:
                raise LayoutError(f"Split {node.id!r} has ratio {node.ratio} out of range")
            stack.append(node.second)
            stack.append(node.first)
        else:
            raise LayoutError(f"Unexpected node type: {type(node).__name__}")

    if active_pane_id not in leaf_ids:
        raise LayoutError(f"Active pane {active_pane_id!r} is not a leaf in the tree")
