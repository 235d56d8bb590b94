"""Main application for split-ide."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from .config import Config
from .config.defaults import UNTITLED_PREFIX
from .layout import LayoutStore
from .models import FileStore, LayoutState
from .widgets import PaneTreeView

logger = logging.getLogger(__name__)


class SplitIdeApp(App):
    """Terminal text editor with a recursively splittable editing area."""

    CSS = """
    #pane-tree {
        height: 1fr;
    }

    .leaf-view {
        height: 1fr;
        width: 1fr;
    }

    .pane-header {
        height: 1;
        background: $surface-darken-2;
    }

    .leaf-view.-active > .pane-header {
        background: $primary;
    }

    .pane-title {
        width: 1fr;
        padding: 0 1;
    }

    .pane-btn {
        width: 3;
        min-width: 3;
        height: 1;
        border: none;
        padding: 0;
        background: $surface-darken-1;
        color: $text-muted;
    }

    .pane-btn:hover {
        background: $accent;
        color: $text;
    }

    .pane-empty {
        height: 1fr;
        content-align: center middle;
        color: $text-muted;
    }

    CodeEditor {
        height: 1fr;
        border: none;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        # Split operations
        Binding("ctrl+backslash", "split", "Split", priority=True),
        Binding("alt+v", "split_vertical", "Split Right", priority=True),
        Binding("alt+h", "split_horizontal", "Split Down", priority=True),
        Binding("ctrl+w", "close_pane", "Close Pane", priority=True),
        Binding("alt+0", "reset_layout", "Reset Layout", priority=True),
        # Focus
        Binding("f6", "focus_next_pane", "Next Pane", priority=True),
        Binding("shift+f6", "focus_previous_pane", "Previous Pane", priority=True, show=False),
        # Resize
        Binding("alt+period", "grow_pane", "Grow", priority=True, show=False),
        Binding("alt+comma", "shrink_pane", "Shrink", priority=True, show=False),
    ]

    def __init__(
        self,
        paths: Sequence[str] = (),
        config: Optional[Config] = None,
        store: Optional[LayoutStore] = None,
    ):
        super().__init__()
        self.root_path = Path.cwd()
        self.config = config or Config.load(self.root_path)
        self.store = store or LayoutStore()
        self.files = FileStore()
        self._unsubscribe = None

        first_file = None
        for path in paths:
            file_id = self.open_path(Path(path))
            if first_file is None:
                first_file = file_id
        if first_file is None:
            first_file = self.files.add_file(f"{UNTITLED_PREFIX}-1")
        self.store.set_pane_file(self.store.active_pane_id, first_file)

    def open_path(self, path: Path) -> Optional[str]:
        """Read a file from disk into the file collection."""
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot open %s: %s", path, e)
            return None
        return self.files.add_file(path.name, content, str(path))

    def compose(self) -> ComposeResult:
        yield Header()
        yield PaneTreeView(self.store, self.files, self.config, id="pane-tree")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "split-ide"
        self._update_subtitle()
        self._unsubscribe = self.store.subscribe(self._on_layout_changed)
        self.call_after_refresh(self.query_one(PaneTreeView).focus_active)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_layout_changed(self, state: LayoutState) -> None:
        self.query_one(PaneTreeView).sync(state)
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        count = self.store.get_pane_count()
        self.sub_title = f"{count} pane" if count == 1 else f"{count} panes"

    # -- split operations -----------------------------------------------------

    def _split_active(self, direction: str) -> Optional[str]:
        """Split the active pane and open a new untitled file in the new half."""
        file_id = self.files.new_untitled()
        new_pane_id = self.store.split_active(direction, file_id)
        if new_pane_id is None:
            self.files.remove_file(file_id)
        return new_pane_id

    def action_split(self) -> None:
        self._split_active(self.config.layout.default_direction)

    def action_split_vertical(self) -> None:
        self._split_active("vertical")

    def action_split_horizontal(self) -> None:
        self._split_active("horizontal")

    def action_close_pane(self) -> None:
        if self.store.get_pane_count() <= 1:
            self.notify("Cannot close the last pane", severity="warning")
            return
        self.store.close_pane(self.store.active_pane_id)

    def action_reset_layout(self) -> None:
        """Collapse to a single pane that keeps the active pane's file."""
        file_id = self.store.get_active_leaf().file_id
        self.store.reset()
        self.store.set_pane_file(self.store.active_pane_id, file_id)

    # -- focus ----------------------------------------------------------------

    def action_focus_next_pane(self) -> None:
        self.store.focus_next()
        self.query_one(PaneTreeView).focus_active()

    def action_focus_previous_pane(self) -> None:
        self.store.focus_previous()
        self.query_one(PaneTreeView).focus_active()

    # -- resize ---------------------------------------------------------------

    def _resize_active(self, grow: bool) -> None:
        active_id = self.store.active_pane_id
        parent = self.store.get_parent_split(active_id)
        if parent is None:
            return
        step = self.config.layout.resize_step
        # ratio belongs to the first child
        if (parent.first.id == active_id) != grow:
            step = -step
        self.store.adjust_ratio(parent.id, step)

    def action_grow_pane(self) -> None:
        self._resize_active(grow=True)

    def action_shrink_pane(self) -> None:
        self._resize_active(grow=False)


def main():
    """Entry point."""
    level = os.environ.get("SPLIT_IDE_LOG")
    if level:
        logging.basicConfig(
            level=level.upper(),
            filename=os.environ.get("SPLIT_IDE_LOG_FILE", "split-ide.log"),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    app = SplitIdeApp(sys.argv[1:])
    app.run()


if __name__ == "__main__":
    main()
