"""Layout store: the current pane tree and the focused pane.

Every operation is synchronous and never raises on bad input. An operation
either replaces the whole state with a new snapshot and notifies the
listeners, or does nothing. Snapshots handed out earlier are never modified.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional, cast

from ..config.defaults import DEFAULT_RATIO, INITIAL_PANE_ID
from ..models.pane import Direction, Leaf, PaneNode, Split, is_direction
from ..models.state import LayoutState
from ..utils import clamp_ratio, is_finite
from .ids import IdGenerator
from .tree import (
    count_leaves,
    find_node,
    find_parent,
    get_all_leaves,
    get_first_leaf,
    map_tree,
    replace_node,
)

logger = logging.getLogger(__name__)

Listener = Callable[[LayoutState], None]


def _initial_state() -> LayoutState:
    return LayoutState(root=Leaf(id=INITIAL_PANE_ID), active_pane_id=INITIAL_PANE_ID)


class LayoutStore:
    """Holds the pane tree and exposes the operations that change it.

    Args:
        seed: Optional seed for node id generation, for reproducible ids.

    Example:
        ```python
        store = LayoutStore()
        right = store.split_pane("pane-initial", "vertical")
        store.set_active_pane("pane-initial")
        store.close_pane(right)
        ```
    """

    def __init__(self, seed: Optional[int] = None):
        self._ids = IdGenerator(seed)
        self._state = _initial_state()
        self._listeners: list[Listener] = []

    # -- snapshot reads -----------------------------------------------------

    @property
    def state(self) -> LayoutState:
        return self._state

    @property
    def root(self) -> PaneNode:
        return self._state.root

    @property
    def active_pane_id(self) -> str:
        return self._state.active_pane_id

    def is_split(self) -> bool:
        return self._state.is_split

    def get_pane_count(self) -> int:
        return count_leaves(self._state.root)

    def get_leaves(self) -> list[Leaf]:
        return get_all_leaves(self._state.root)

    def get_active_leaf(self) -> Leaf:
        return cast(Leaf, find_node(self._state.root, self._state.active_pane_id))

    def get_parent_split(self, pane_id: str) -> Optional[Split]:
        return find_parent(self._state.root, pane_id)

    # -- subscriptions ------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new state. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, root: PaneNode, active_pane_id: str) -> None:
        self._state = LayoutState(root=root, active_pane_id=active_pane_id)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Layout listener %r failed", listener)

    # -- mutations ----------------------------------------------------------

    def split_pane(
        self,
        pane_id: str,
        direction: Direction,
        new_file_id: Optional[str] = None,
    ) -> Optional[str]:
        """Split a leaf in two. Returns the new leaf's id, or None.

        The existing leaf becomes ``first`` of the new split, the new leaf
        becomes ``second`` and takes focus.
        """
        if not is_direction(direction):
            logger.debug("Split refused: unknown direction %r", direction)
            return None

        root = self._state.root
        target = find_node(root, pane_id)
        if not isinstance(target, Leaf):
            logger.debug("Split refused: %r is not a leaf", pane_id)
            return None

        new_leaf = Leaf(id=self._ids.pane_id(), file_id=new_file_id)
        new_split = Split(
            id=self._ids.split_id(),
            direction=direction,
            ratio=DEFAULT_RATIO,
            first=target,
            second=new_leaf,
        )
        self._commit(replace_node(root, pane_id, new_split), new_leaf.id)
        logger.debug("Split %s %s -> %s", pane_id, direction, new_leaf.id)
        return new_leaf.id

    def split_active(
        self, direction: Direction, new_file_id: Optional[str] = None
    ) -> Optional[str]:
        return self.split_pane(self._state.active_pane_id, direction, new_file_id)

    def close_pane(self, pane_id: str) -> None:
        """Remove a pane; its parent split collapses into the sibling.

        The last remaining pane cannot be closed. If focus was inside the
        removed pane it moves to the sibling's first leaf.
        """
        root = self._state.root
        if count_leaves(root) <= 1:
            logger.debug("Close refused: %r is the last pane", pane_id)
            return

        parent = find_parent(root, pane_id)
        if parent is None:
            logger.debug("Close refused: %r has no parent split", pane_id)
            return

        sibling = parent.other_child(pane_id)
        new_root = replace_node(root, parent.id, sibling)

        active_id = self._state.active_pane_id
        if find_node(new_root, active_id) is None:
            active_id = get_first_leaf(sibling).id

        self._commit(new_root, active_id)
        logger.debug("Closed %s, focus on %s", pane_id, active_id)

    def set_ratio(self, split_id: str, ratio: float) -> None:
        """Set a split's ratio, clamped to the allowed range."""
        if not is_finite(ratio):
            logger.debug("Ratio ignored: %r is not a finite number", ratio)
            return
        ratio = clamp_ratio(ratio)

        def patch(node: PaneNode) -> PaneNode:
            if isinstance(node, Split) and node.id == split_id and node.ratio != ratio:
                return replace(node, ratio=ratio)
            return node

        new_root = map_tree(self._state.root, patch)
        if new_root is not self._state.root:
            self._commit(new_root, self._state.active_pane_id)

    def adjust_ratio(self, split_id: str, delta: float) -> None:
        """Move a split's divider by ``delta`` (clamped)."""
        node = find_node(self._state.root, split_id)
        if isinstance(node, Split):
            self.set_ratio(split_id, node.ratio + delta)

    def set_pane_file(self, pane_id: str, file_id: Optional[str]) -> None:
        """Show ``file_id`` in a leaf. None leaves the pane empty."""

        def patch(node: PaneNode) -> PaneNode:
            if isinstance(node, Leaf) and node.id == pane_id and node.file_id != file_id:
                return replace(node, file_id=file_id)
            return node

        new_root = map_tree(self._state.root, patch)
        if new_root is not self._state.root:
            self._commit(new_root, self._state.active_pane_id)

    def set_active_pane(self, pane_id: str) -> None:
        """Focus a leaf. Unknown ids and split ids are ignored."""
        if pane_id == self._state.active_pane_id:
            return
        node = find_node(self._state.root, pane_id)
        if not isinstance(node, Leaf):
            logger.debug("Focus refused: %r is not a leaf", pane_id)
            return
        self._commit(self._state.root, pane_id)

    def focus_next(self) -> None:
        self._cycle_focus(1)

    def focus_previous(self) -> None:
        self._cycle_focus(-1)

    def _cycle_focus(self, step: int) -> None:
        leaf_ids = [leaf.id for leaf in self.get_leaves()]
        if len(leaf_ids) < 2:
            return
        idx = leaf_ids.index(self._state.active_pane_id)
        self.set_active_pane(leaf_ids[(idx + step) % len(leaf_ids)])

    def reset(self) -> None:
        """Return to a single empty pane and restart id generation."""
        self._ids.reset()
        initial = _initial_state()
        self._commit(initial.root, initial.active_pane_id)
