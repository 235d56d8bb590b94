"""Pane tree widgets for split-ide.

``PaneTreeView`` renders a ``LayoutStore`` snapshot: every Leaf becomes a
``LeafView`` (header plus editor) and every Split becomes a ``SplitView``
holding both children and a draggable ``Divider``.

Structural changes (split, close, new file in a pane) rebuild the widgets.
Ratio and focus changes are applied to the existing widgets so a drag in
progress keeps its mouse capture.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static, TextArea

from ..config import Config
from ..layout import DragSession, LayoutStore, iter_nodes
from ..layout.drag import Bounds
from ..models import FileData, FileStore, Leaf, LayoutState, PaneNode, Split

logger = logging.getLogger(__name__)


def view_id(node_id: str) -> str:
    """DOM id of the widget rendering ``node_id``."""
    return f"view-{node_id}"


def tree_shape(root: PaneNode) -> tuple:
    """Everything about a tree that needs a rebuild when it changes.

    Ratios are left out: they are applied to existing widgets.
    """
    shape = []
    for node in iter_nodes(root):
        if isinstance(node, Leaf):
            shape.append(("leaf", node.id, node.file_id))
        else:
            shape.append(("split", node.id, node.direction))
    return tuple(shape)


class CodeEditor(TextArea):
    """TextArea bound to a file id that leaves pane keys to the app."""

    PASSTHROUGH_KEYS = {
        "ctrl+w", "f6", "shift+f6",
        "alt+v", "alt+h", "alt+period", "alt+comma", "alt+0",
    }

    def __init__(self, text: str, file_id: str, **kwargs):
        super().__init__(text, **kwargs)
        self.file_id = file_id

    async def _on_key(self, event: events.Key) -> None:
        if event.key in self.PASSTHROUGH_KEYS:
            return
        await super()._on_key(event)


class LeafView(Vertical):
    """A single pane: header bar and the editor for its file."""

    class Focused(Message):
        """Sent when the pane is clicked."""

        def __init__(self, pane_id: str):
            super().__init__()
            self.pane_id = pane_id

    class CloseRequested(Message):
        def __init__(self, pane_id: str):
            super().__init__()
            self.pane_id = pane_id

    class SplitRequested(Message):
        def __init__(self, pane_id: str, direction: str):
            super().__init__()
            self.pane_id = pane_id
            self.direction = direction

    def __init__(
        self,
        leaf: Leaf,
        file: Optional[FileData],
        *,
        active: bool = False,
        closable: bool = False,
        config: Optional[Config] = None,
    ):
        super().__init__(id=view_id(leaf.id), classes="leaf-view")
        self.leaf = leaf
        self.file = file
        self.closable = closable
        self.config = config or Config()
        self.set_class(active, "-active")

    @property
    def pane_id(self) -> str:
        return self.leaf.id

    def compose(self) -> ComposeResult:
        with Horizontal(classes="pane-header"):
            yield Static(self.header_text(), classes="pane-title")
            yield Button("|", name="vertical", classes="pane-btn")
            yield Button("-", name="horizontal", classes="pane-btn")
            if self.closable and self.config.layout.show_close_button:
                yield Button("x", name="close", classes="pane-btn")
        if self.file is None:
            yield Static("Empty pane", classes="pane-empty")
        else:
            editor = CodeEditor(
                self.file.content,
                self.file.id,
                show_line_numbers=self.config.editor.show_line_numbers,
                tab_behavior="indent",
            )
            editor.indent_width = self.config.editor.tab_size
            yield editor

    def header_text(self) -> Text:
        text = Text()
        text.append("● " if self.has_class("-active") else "  ", style="bold")
        text.append(self.file.display_name if self.file else "(no file)")
        return text

    def refresh_header(self) -> None:
        self.query_one(".pane-title", Static).update(self.header_text())

    def set_active(self, active: bool) -> None:
        self.set_class(active, "-active")
        self.refresh_header()

    def focus_editor(self) -> None:
        for editor in self.query(CodeEditor):
            editor.focus()

    def on_click(self, event: events.Click) -> None:
        self.post_message(self.Focused(self.pane_id))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.name == "close":
            self.post_message(self.CloseRequested(self.pane_id))
        elif event.button.name in ("vertical", "horizontal"):
            self.post_message(self.SplitRequested(self.pane_id, event.button.name))


class Divider(Widget):
    """The draggable bar between the two children of a split."""

    DEFAULT_CSS = """
    Divider {
        background: $primary-darken-1;
    }

    Divider.-vertical {
        width: 1;
        height: 1fr;
    }

    Divider.-horizontal {
        height: 1;
        width: 1fr;
    }

    Divider:hover, Divider.-dragging {
        background: $accent;
    }
    """

    class DragStarted(Message):
        def __init__(self, split_id: str, direction: str, bounds: Bounds):
            super().__init__()
            self.split_id = split_id
            self.direction = direction
            self.bounds = bounds

    class DragMoved(Message):
        def __init__(self, split_id: str, x: int, y: int):
            super().__init__()
            self.split_id = split_id
            self.x = x
            self.y = y

    class DragEnded(Message):
        def __init__(self, split_id: str):
            super().__init__()
            self.split_id = split_id

    def __init__(self, split: Split):
        super().__init__(classes=f"-{split.direction}")
        self.split_id = split.id
        self.direction = split.direction
        self._dragging = False

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.parent is None:
            return
        region = self.parent.region
        self._dragging = True
        self.add_class("-dragging")
        self.capture_mouse()
        self.post_message(
            self.DragStarted(
                self.split_id,
                self.direction,
                (region.x, region.y, region.width, region.height),
            )
        )
        event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self._dragging:
            self.post_message(self.DragMoved(self.split_id, event.screen_x, event.screen_y))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if not self._dragging:
            return
        self._dragging = False
        self.remove_class("-dragging")
        self.release_mouse()
        self.post_message(self.DragEnded(self.split_id))


class SplitView(Container):
    """Two pane views laid out along the split direction."""

    DEFAULT_CSS = """
    SplitView.-vertical {
        layout: horizontal;
    }

    SplitView.-horizontal {
        layout: vertical;
    }
    """

    def __init__(self, split: Split, first: Widget, second: Widget):
        super().__init__(
            first,
            Divider(split),
            second,
            id=view_id(split.id),
            classes=f"split-view -{split.direction}",
        )
        self.split = split
        self.first_view = first
        self.second_view = second
        self.apply_ratio(split.ratio)

    def apply_ratio(self, ratio: float) -> None:
        first = f"{ratio:.4f}fr"
        second = f"{1 - ratio:.4f}fr"
        if self.split.direction == "vertical":
            self.first_view.styles.width = first
            self.second_view.styles.width = second
            self.first_view.styles.height = "1fr"
            self.second_view.styles.height = "1fr"
        else:
            self.first_view.styles.height = first
            self.second_view.styles.height = second
            self.first_view.styles.width = "1fr"
            self.second_view.styles.width = "1fr"


class PaneTreeView(Container):
    """Renders the layout store's tree and routes pane events back to it.

    Args:
        store: Layout store to render and update.
        files: File collection the panes show.
        config: Settings for headers and editors.
    """

    def __init__(
        self,
        store: LayoutStore,
        files: FileStore,
        config: Optional[Config] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.store = store
        self.files = files
        self.config = config or Config()
        self._state: LayoutState = store.state
        self._shape = tree_shape(self._state.root)
        self._drag: Optional[DragSession] = None

    def compose(self) -> ComposeResult:
        yield self._build(self._state.root)

    def _build(self, node: PaneNode) -> Widget:
        if isinstance(node, Leaf):
            return LeafView(
                node,
                self.files.find(node.file_id),
                active=node.id == self._state.active_pane_id,
                closable=self._state.is_split,
                config=self.config,
            )
        return SplitView(node, self._build(node.first), self._build(node.second))

    def sync(self, state: LayoutState) -> None:
        """Bring the widgets in line with ``state``."""
        self._state = state
        shape = tree_shape(state.root)
        if shape != self._shape:
            self._shape = shape
            self.call_later(self._rebuild)
            return

        ratios = {
            node.id: node.ratio for node in iter_nodes(state.root) if isinstance(node, Split)
        }
        for split_view in self.query(SplitView):
            if split_view.split.id in ratios:
                split_view.apply_ratio(ratios[split_view.split.id])
        for view in self.query(LeafView):
            active = view.pane_id == state.active_pane_id
            if active != view.has_class("-active"):
                view.set_active(active)

    async def _rebuild(self) -> None:
        await self.recompose()
        self.focus_active()

    def focus_active(self) -> None:
        for view in self.query(LeafView):
            if view.pane_id == self._state.active_pane_id:
                view.focus_editor()

    def refresh_headers(self, file_id: str) -> None:
        for view in self.query(LeafView):
            if view.file is not None and view.file.id == file_id:
                view.refresh_header()

    # -- pane events ----------------------------------------------------------

    def on_leaf_view_focused(self, event: LeafView.Focused) -> None:
        self.store.set_active_pane(event.pane_id)

    def on_leaf_view_close_requested(self, event: LeafView.CloseRequested) -> None:
        self.store.close_pane(event.pane_id)

    def on_leaf_view_split_requested(self, event: LeafView.SplitRequested) -> None:
        file_id = self.files.new_untitled()
        if self.store.split_pane(event.pane_id, event.direction, file_id) is None:
            self.files.remove_file(file_id)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        editor = event.text_area
        if not isinstance(editor, CodeEditor) or editor.file_id not in self.files:
            return
        data = self.files.get(editor.file_id)
        if data.content != editor.text:
            self.files.update_file(editor.file_id, editor.text)
            self.refresh_headers(editor.file_id)

    # -- divider drags --------------------------------------------------------

    def on_divider_drag_started(self, event: Divider.DragStarted) -> None:
        self._drag = DragSession(self.store, event.split_id, event.direction, event.bounds)

    def on_divider_drag_moved(self, event: Divider.DragMoved) -> None:
        if self._drag is not None and self._drag.split_id == event.split_id:
            self._drag.move(event.x, event.y)

    def on_divider_drag_ended(self, event: Divider.DragEnded) -> None:
        if self._drag is not None:
            self._drag.end()
            self._drag = None
