"""split-ide: terminal text editor with a splittable editing area.

The heart of the package is the split-pane layout engine: a binary tree of
panes plus a store holding the tree and the focused pane.

Quick Start (Application):
    ```python
    from split_ide import SplitIdeApp

    app = SplitIdeApp(["notes.md"])
    app.run()
    ```

Using the Layout Engine:
    ```python
    from split_ide.layout import LayoutStore

    store = LayoutStore()
    right = store.split_pane("pane-initial", "vertical")
    store.split_active("horizontal")
    store.close_pane(right)
    ```
"""

__version__ = "0.1.0"

from .app import SplitIdeApp
from .config import Config
from .exceptions import (
    ConfigError,
    FileOperationError,
    LayoutError,
    SplitIdeError,
)
from .layout import DragSession, LayoutStore
from .models import FileData, FileStore, Leaf, LayoutState, PaneNode, Split

__all__ = [
    # Main application
    "SplitIdeApp",
    # Configuration
    "Config",
    # Layout engine
    "LayoutStore",
    "DragSession",
    # Models
    "Leaf",
    "Split",
    "PaneNode",
    "LayoutState",
    "FileData",
    "FileStore",
    # Exceptions
    "SplitIdeError",
    "ConfigError",
    "FileOperationError",
    "LayoutError",
    # Version
    "__version__",
]
