"""Drag-to-resize sessions for split dividers."""

from __future__ import annotations

import logging

from ..config.defaults import DEFAULT_RATIO
from ..models.pane import Direction
from .store import LayoutStore

logger = logging.getLogger(__name__)

# x, y, width, height of the area a split divides
Bounds = tuple[float, float, float, float]


def ratio_from_position(direction: Direction, x: float, y: float, bounds: Bounds) -> float:
    """Convert a pointer position into a split ratio (unclamped).

    A "vertical" split places its children side by side, so the ratio
    follows ``x`` across the width of ``bounds``. A "horizontal" split
    stacks them and follows ``y`` down the height.
    """
    left, top, width, height = bounds
    if direction == "vertical":
        position, origin, extent = x, left, width
    else:
        position, origin, extent = y, top, height
    if extent <= 0:
        return DEFAULT_RATIO
    return (position - origin) / extent


class DragSession:
    """One pointer-down ... pointer-up interaction on a divider.

    Each ``move`` applies a complete ``set_ratio`` so the layout is
    consistent between moves. Moves after ``end`` are ignored.

    Args:
        store: The layout store to update.
        split_id: Id of the split whose divider is dragged.
        direction: Direction of that split.
        bounds: Screen area of the split as (x, y, width, height).
    """

    def __init__(
        self,
        store: LayoutStore,
        split_id: str,
        direction: Direction,
        bounds: Bounds,
    ):
        self.store = store
        self.split_id = split_id
        self.direction = direction
        self.bounds = bounds
        self.active = True

    def move(self, x: float, y: float) -> None:
        if not self.active:
            return
        ratio = ratio_from_position(self.direction, x, y, self.bounds)
        self.store.set_ratio(self.split_id, ratio)

    def end(self) -> None:
        if self.active:
            logger.debug("Drag on %s ended", self.split_id)
        self.active = False
