"""ResourceTable widget - a virtualized table drawn through the Line API.

The widget owns one ``TableEngine``. Textual asks for one line at a time via
``render_line``; the engine renders (or serves from its cache) only the rows
that are on screen, so the cost of a repaint is bounded by the viewport
height, not by the number of rows.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from rich.text import Text
from textual import events
from textual.message import Message
from textual.strip import Strip
from textual.timer import Timer
from textual.widget import Widget

from kubewatch.engine.refresh import RefreshComplete, RefreshEvent
from kubewatch.engine.table import TableEngine, TableStats
from kubewatch.keyboard import TABLE_BINDINGS
from kubewatch.models.state.app_settings import AppSettings
from kubewatch.models.table.column import ColumnSpec
from kubewatch.models.table.row import Row
from kubewatch.models.table.theme import TableTheme

logger = logging.getLogger(__name__)


class ResourceTable(Widget, can_focus=True):
    """Keyboard driven resource table backed by a ``TableEngine``.

    CSS Classes: widget-resource-table

    Example:
        ```python
        table = ResourceTable(settings=AppSettings(), id="resource-table")
        table.post_message(ResourceTable.RefreshReceived(event))
        ```
    """

    DEFAULT_CSS = """
    ResourceTable {
        height: 1fr;
        width: 1fr;
        min-height: 2;
    }
    """

    BINDINGS = TABLE_BINDINGS

    class RefreshReceived(Message):
        """A refresh outcome addressed to the table.

        Attributes:
            event: ``RefreshComplete`` or ``RefreshFailed``
            duration_ms: Time the fetch took in milliseconds
        """

        def __init__(self, event: RefreshEvent, duration_ms: float = 0.0) -> None:
            super().__init__()
            self.event = event
            self.duration_ms = duration_ms
            self.applied = False

    class SelectionChanged(Message):
        """The selected row or the row count changed."""

        def __init__(self, table: ResourceTable, index: int, row: Row | None, total: int) -> None:
            super().__init__()
            self.table = table
            self.index = index
            self.row = row
            self.total = total

        @property
        def control(self) -> ResourceTable:
            return self.table

    def __init__(
        self,
        engine: TableEngine | None = None,
        *,
        settings: AppSettings | None = None,
        columns: Sequence[ColumnSpec] = (),
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(id=id, classes=f"widget-resource-table {classes}".strip())
        if engine is None:
            engine = TableEngine.from_settings(settings or AppSettings(), columns)
        self.engine = engine
        self._on_scroll_end: Callable[[], None] | None = None
        self.engine.set_on_scroll_end(self._handle_scroll_end)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def on_mount(self) -> None:
        self.engine.set_scheduler(self._schedule)
        self.engine.set_size(self.size.width, self.size.height)

    def on_unmount(self) -> None:
        self.engine.viewport.cancel_pending()
        self.engine.set_scheduler(None)

    def on_resize(self, event: events.Resize) -> None:
        self.engine.set_size(event.size.width, event.size.height)
        self.refresh()

    def _schedule(self, delay: float, callback: Callable[[], None]) -> Timer:
        return self.set_timer(delay, callback, name="scroll-end")

    def _handle_scroll_end(self) -> None:
        if self._on_scroll_end is not None:
            self._on_scroll_end()

    def set_on_scroll_end(self, callback: Callable[[], None] | None) -> None:
        """Run ``callback`` once scrolling has been idle for a moment."""
        self._on_scroll_end = callback

    # ------------------------------------------------------------------
    # Line API
    # ------------------------------------------------------------------

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        text: Text = self.engine.render_line(y)
        segments = list(text.render(self.app.console))
        strip = Strip(segments, text.cell_len)
        offset = self.engine.horizontal_offset
        return strip.crop(offset, offset + width).adjust_cell_length(width)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self.engine.rows)

    @property
    def stats(self) -> TableStats:
        return self.engine.get_stats()

    def apply_refresh(self, event: RefreshEvent) -> bool:
        """Apply a refresh event; stale events are ignored.

        Returns:
            True if the event was newer than the last applied one.
        """
        applied = self.engine.apply_refresh(event)
        if applied and isinstance(event, RefreshComplete):
            self._changed()
        return applied

    def set_columns(self, columns: Sequence[ColumnSpec]) -> None:
        self.engine.set_columns(columns)
        self.refresh()

    def clear(self, columns: Sequence[ColumnSpec] | None = None) -> None:
        """Drop every row, optionally switching to new columns."""
        if columns is not None:
            self.engine.set_columns(columns)
        self.engine.set_rows(())
        self._changed()

    def set_theme(self, theme: TableTheme | str) -> None:
        self.engine.set_theme(theme)
        self.refresh()

    def on_resource_table_refresh_received(self, message: ResourceTable.RefreshReceived) -> None:
        message.applied = self.apply_refresh(message.event)

    def _changed(self) -> None:
        self.refresh()
        self.post_message(
            self.SelectionChanged(
                self,
                self.engine.selected_index,
                self.engine.selected_row,
                len(self.engine.rows),
            )
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _navigate(self, move: Callable[[], Any]) -> None:
        before = self.engine.selected_index
        move()
        if self.engine.selected_index != before:
            self._changed()
        else:
            self.refresh()

    def action_cursor_up(self) -> None:
        self._navigate(self.engine.move_up)

    def action_cursor_down(self) -> None:
        self._navigate(self.engine.move_down)

    def action_page_up(self) -> None:
        self._navigate(self.engine.page_up)

    def action_page_down(self) -> None:
        self._navigate(self.engine.page_down)

    def action_scroll_home(self) -> None:
        self._navigate(self.engine.home)

    def action_scroll_end(self) -> None:
        self._navigate(self.engine.end)

    def action_scroll_left(self) -> None:
        self.engine.scroll_left()
        self.refresh()

    def action_scroll_right(self) -> None:
        self.engine.scroll_right()
        self.refresh()

    def action_toggle_wrap(self) -> None:
        wrap = self.engine.toggle_wrap()
        logger.debug("Cell wrap %s", "on" if wrap else "off")
        self._changed()

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.stop()
        self._navigate(self.engine.move_down)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.stop()
        self._navigate(self.engine.move_up)


__all__ = ["ResourceTable"]
