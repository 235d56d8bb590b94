"""Pane tree nodes.

A pane tree is a strictly binary tree made of two node kinds:

- ``Leaf``: one visible editing surface, optionally showing a file.
- ``Split``: divides its area between ``first`` and ``second`` along
  ``direction``, giving ``ratio`` of the space to ``first``.

Nodes are frozen. Every update builds new nodes along the path from the
root to the changed node, so a previously published tree is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Optional, Union

Direction = Literal["horizontal", "vertical"]

# "vertical" places the children side by side, "horizontal" stacks them
DIRECTIONS: tuple[str, ...] = ("horizontal", "vertical")


@dataclass(frozen=True)
class Leaf:
    """A terminal pane holding an optional reference to a file."""

    kind: ClassVar[str] = "leaf"

    id: str
    file_id: Optional[str] = None


@dataclass(frozen=True)
class Split:
    """An internal pane dividing its area between two children."""

    kind: ClassVar[str] = "split"

    id: str
    direction: Direction
    ratio: float
    first: PaneNode
    second: PaneNode

    def child_ids(self) -> tuple[str, str]:
        return self.first.id, self.second.id

    def other_child(self, child_id: str) -> PaneNode:
        """Return the child that is not ``child_id``."""
        return self.second if self.first.id == child_id else self.first


PaneNode = Union[Leaf, Split]


def is_direction(value: object) -> bool:
    return value in DIRECTIONS
