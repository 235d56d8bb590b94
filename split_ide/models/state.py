"""State snapshot published by the layout store."""

from __future__ import annotations

from dataclasses import dataclass

from .pane import PaneNode


@dataclass(frozen=True)
class LayoutState:
    """The pane tree together with the focused pane.

    ``active_pane_id`` always names a Leaf inside ``root``.
    """

    root: PaneNode
    active_pane_id: str

    @property
    def is_split(self) -> bool:
        return self.root.kind == "split"
