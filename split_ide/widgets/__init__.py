"""Widget components for split-ide."""

from .panes import CodeEditor, Divider, LeafView, PaneTreeView, SplitView

__all__ = [
    "PaneTreeView",
    "SplitView",
    "LeafView",
    "Divider",
    "CodeEditor",
]
