"""Data models for split-ide."""

from .files import FileData, FileStore
from .pane import DIRECTIONS, Direction, Leaf, PaneNode, Split
from .state import LayoutState

__all__ = [
    "Leaf",
    "Split",
    "PaneNode",
    "Direction",
    "DIRECTIONS",
    "LayoutState",
    "FileData",
    "FileStore",
]
