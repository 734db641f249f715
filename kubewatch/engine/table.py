"""Table engine: one instance per view.

Ties together the column layout, the viewport manager, selection
reconciliation and the row renderer. The engine performs no I/O and raises
nothing for out-of-range input; every index and size is clamped.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from rich.cells import cell_len
from rich.text import Text

from kubewatch.constants.defaults import (
    BUFFER_SIZE_DEFAULT,
    CONTEXT_ROWS_DEFAULT,
    HORIZONTAL_SCROLL_STEP_DEFAULT,
    SHOW_HEADER_DEFAULT,
)
from kubewatch.constants.limits import MAX_ROWS_DISPLAY, MIN_VIEWPORT_HEIGHT, RENDER_CACHE_SIZE
from kubewatch.constants.timeouts import SCROLL_END_QUIESCENCE
from kubewatch.constants.values import EMPTY_TABLE_MESSAGE
from kubewatch.engine.debounce import Scheduler
from kubewatch.engine.layout import SEPARATOR_WIDTH, compute_widths, total_width
from kubewatch.engine.refresh import RefreshComplete, RefreshEvent, RefreshTracker
from kubewatch.engine.renderer import (
    render_header,
    render_message,
    render_row,
    row_signature,
)
from kubewatch.engine.selection import reconcile
from kubewatch.engine.viewport import ViewportManager, ViewportStats
from kubewatch.models.state.app_settings import AppSettings
from kubewatch.models.table.column import ColumnSpec
from kubewatch.models.table.row import Row, RowSet
from kubewatch.models.table.theme import DEFAULT_THEME, TableTheme, get_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableStats(ViewportStats):
    """Viewport stats plus table-level selection and scroll state."""

    selected_index: int = 0
    horizontal_offset: int = 0
    wrap: bool = False


class TableEngine:
    """Virtualized table state for a single view.

    Rows are replaced wholesale on every refresh; the selection follows the
    previously selected row by identity and the viewport is kept around it.
    Only rows in the viewport's render range are ever rendered, and rendered
    lines are cached per row index.
    """

    def __init__(
        self,
        columns: Sequence[ColumnSpec] = (),
        *,
        theme: TableTheme = DEFAULT_THEME,
        buffer_size: int = BUFFER_SIZE_DEFAULT,
        cache_size: int = RENDER_CACHE_SIZE,
        scroll_end_delay: float = SCROLL_END_QUIESCENCE,
        context_rows: int = CONTEXT_ROWS_DEFAULT,
        max_rows: int = MAX_ROWS_DISPLAY,
        show_header: bool = SHOW_HEADER_DEFAULT,
        horizontal_scroll_step: int = HORIZONTAL_SCROLL_STEP_DEFAULT,
        clock: Callable[[], float] = time.monotonic,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._columns: tuple[ColumnSpec, ...] = tuple(columns)
        self._rows: tuple[Row, ...] = ()
        self._theme = theme
        self._context_rows = context_rows
        self._max_rows = max(1, max_rows)
        self._show_header = show_header
        self._horizontal_step = max(1, horizontal_scroll_step)

        self._width = 0
        self._height = 0
        self._widths: list[int] = compute_widths(self._columns, 0)
        self._selected_index = 0
        self._horizontal_offset = 0
        self._wrap = False
        self._content_width: int | None = None

        self.viewport = ViewportManager(
            viewport_height=MIN_VIEWPORT_HEIGHT,
            buffer_size=buffer_size,
            cache_size=cache_size,
            scroll_end_delay=scroll_end_delay,
            clock=clock,
            scheduler=scheduler,
        )
        self.viewport.set_on_scroll_end(self._handle_scroll_end)
        self.tracker = RefreshTracker(clock=clock)
        self._on_scroll_end: Callable[[], None] | None = None

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        columns: Sequence[ColumnSpec] = (),
        **kwargs,
    ) -> TableEngine:
        """Build an engine tuned by ``settings``."""
        return cls(
            columns,
            theme=get_theme(settings.theme),
            buffer_size=settings.buffer_size,
            cache_size=settings.cache_size,
            scroll_end_delay=settings.scroll_end_delay,
            context_rows=settings.context_rows,
            max_rows=settings.max_rows,
            show_header=settings.show_header,
            horizontal_scroll_step=settings.horizontal_scroll_step,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return self._columns

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @property
    def widths(self) -> list[int]:
        return list(self._widths)

    @property
    def theme(self) -> TableTheme:
        return self._theme

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected_row(self) -> Row | None:
        if not self._rows:
            return None
        return self._rows[self._selected_index]

    @property
    def horizontal_offset(self) -> int:
        return self._horizontal_offset

    @property
    def wrap(self) -> bool:
        return self._wrap

    @property
    def show_header(self) -> bool:
        return self._show_header

    @property
    def header_lines(self) -> int:
        return 1 if self._show_header else 0

    @property
    def viewport_height(self) -> int:
        return self.viewport.viewport_height

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_columns(self, columns: Sequence[ColumnSpec]) -> None:
        """Replace the column specs, recomputing widths and dropping the cache."""
        columns = tuple(columns)
        if columns == self._columns:
            return
        self._columns = columns
        self._relayout()

    def set_size(self, width: int, height: int) -> None:
        """Resize to ``width`` x ``height`` cells, header line included."""
        width = max(0, width)
        height = max(0, height)
        if width != self._width:
            self._width = width
            self._relayout()
        self._height = height
        self.viewport.set_viewport_height(height - self.header_lines)
        self._clamp_horizontal_offset()
        self._ensure_selection_visible(track=False)

    def set_theme(self, theme: TableTheme | str) -> None:
        resolved = get_theme(theme) if isinstance(theme, str) else theme
        if resolved == self._theme:
            return
        self._theme = resolved
        self.viewport.clear_cache()

    def set_show_header(self, show: bool) -> None:
        if show == self._show_header:
            return
        self._show_header = show
        self.viewport.set_viewport_height(self._height - self.header_lines)
        self._ensure_selection_visible(track=False)

    def set_on_scroll_end(self, callback: Callable[[], None] | None) -> None:
        """Register a callback run after scrolling has been idle for a moment."""
        self._on_scroll_end = callback

    def set_on_viewport_change(self, callback: Callable[[int], None] | None) -> None:
        self.viewport.set_on_viewport_change(callback)

    def set_scheduler(self, scheduler: Scheduler | None) -> None:
        self.viewport.set_scheduler(scheduler)

    def _relayout(self) -> None:
        self._widths = compute_widths(self._columns, self._width)
        self._content_width = None
        self.viewport.clear_cache()
        self._clamp_horizontal_offset()

    # ------------------------------------------------------------------
    # Rows and refresh
    # ------------------------------------------------------------------

    def set_rows(self, rows: RowSet | Sequence[Row]) -> None:
        """Replace the row set, keeping the selection on the same row.

        Rows beyond ``max_rows`` are dropped with a warning.
        """
        new_rows = tuple(rows.rows if isinstance(rows, RowSet) else rows)
        if len(new_rows) > self._max_rows:
            logger.warning(
                "Row set truncated from %d to %d rows for performance",
                len(new_rows),
                self._max_rows,
            )
            new_rows = new_rows[: self._max_rows]

        previous = self.selected_row
        state = reconcile(
            new_rows,
            previous.identity if previous else None,
            self._selected_index,
            self.viewport.viewport_start,
            self.viewport.viewport_height,
            self._context_rows,
        )
        self._rows = new_rows
        self._content_width = None
        self._selected_index = state.selected_index
        self.viewport.set_total_items(len(new_rows), position=state.viewport_start)
        self._clamp_horizontal_offset()

    def apply_refresh(self, event: RefreshEvent) -> bool:
        """Apply a refresh event unless it is older than the last one applied.

        Returns:
            True if the event was applied.
        """
        if not self.tracker.accept(event):
            return False
        if isinstance(event, RefreshComplete):
            if event.columns is not None:
                self.set_columns(event.columns)
            self.set_rows(event.rows)
        else:
            logger.debug("Refresh #%d failed, keeping last good rows: %s", event.sequence, event.error)
        return True

    def refresh_age_label(self) -> str:
        return self.tracker.age_label()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def set_selected_index(self, index: int) -> None:
        """Select row ``index`` (clamped) and scroll it into view."""
        if not self._rows:
            self._selected_index = 0
            return
        self._selected_index = min(max(index, 0), len(self._rows) - 1)
        self._ensure_selection_visible(track=True)

    def move_selection(self, delta: int) -> None:
        self.set_selected_index(self._selected_index + delta)

    def move_up(self) -> None:
        self.move_selection(-1)

    def move_down(self) -> None:
        self.move_selection(1)

    def page_up(self) -> None:
        self.move_selection(-self.viewport.viewport_height)

    def page_down(self) -> None:
        self.move_selection(self.viewport.viewport_height)

    def home(self) -> None:
        self.set_selected_index(0)

    def end(self) -> None:
        self.set_selected_index(len(self._rows) - 1)

    def scroll_left(self) -> None:
        self._horizontal_offset = max(0, self._horizontal_offset - self._horizontal_step)

    def scroll_right(self) -> None:
        self._horizontal_offset += self._horizontal_step
        self._clamp_horizontal_offset()

    def toggle_wrap(self) -> bool:
        """Toggle between truncated cells and full-length cells."""
        self._wrap = not self._wrap
        self._content_width = None
        self.viewport.clear_cache()
        self._clamp_horizontal_offset()
        return self._wrap

    def _ensure_selection_visible(self, track: bool) -> None:
        if not self._rows:
            return
        height = self.viewport.viewport_height
        start = self.viewport.viewport_start
        selected = self._selected_index
        if selected < start:
            target = selected
        elif selected >= start + height:
            target = selected - height + 1
        else:
            return
        if track:
            self.viewport.scroll_to(target)
        else:
            self.viewport.reposition(target)

    def content_width(self) -> int:
        """Width of a full rendered line, before horizontal cropping."""
        if self._content_width is None:
            if not self._wrap:
                self._content_width = total_width(self._widths)
            else:
                widest = list(self._widths)
                for column_index, column in enumerate(self._columns):
                    widest[column_index] = max(widest[column_index], cell_len(column.title))
                for row in self._rows:
                    for column_index in range(len(widest)):
                        widest[column_index] = max(
                            widest[column_index], cell_len(row.value_at(column_index))
                        )
                self._content_width = sum(widest) + SEPARATOR_WIDTH * max(0, len(widest) - 1)
        return self._content_width

    def _clamp_horizontal_offset(self) -> None:
        limit = max(0, self.content_width() - self._width)
        self._horizontal_offset = min(max(0, self._horizontal_offset), limit)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_header(self) -> Text:
        return render_header(self._columns, self._widths, self._theme, self._wrap)

    def render_item(self, index: int) -> Text:
        """Render row ``index`` through the render cache."""
        row = self._rows[index]
        selected = index == self._selected_index
        signature = row_signature(row, selected, self._wrap)
        cached = self.viewport.get_cached_item(index, signature)
        if cached is not None:
            return cached
        line = render_row(
            row,
            index,
            self._columns,
            self._widths,
            self._theme,
            selected=selected,
            wrap=self._wrap,
        )
        self.viewport.cache_rendered_item(index, line, signature)
        return line

    def render_range(self) -> dict[int, Text]:
        """Render every row in the viewport's render range."""
        start, end = self.viewport.get_render_range()
        return {index: self.render_item(index) for index in range(start, end + 1)}

    def render_line(self, y: int) -> Text:
        """Render screen line ``y`` (header first when shown)."""
        if self._show_header:
            if y == 0:
                return self.render_header()
            y -= 1
        if not self._rows:
            if y == 0:
                return render_message(EMPTY_TABLE_MESSAGE, self._width, self._theme.row_style)
            return Text(end="")
        if y < 0 or y >= self.viewport.viewport_height:
            return Text(end="")
        start, end = self.viewport.get_visible_range()
        index = start + y
        if index > end:
            return Text(end="")
        return self.render_item(index)

    def _handle_scroll_end(self) -> None:
        self.render_range()
        if self._on_scroll_end is not None:
            self._on_scroll_end()

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    def get_stats(self) -> TableStats:
        base = self.viewport.get_stats()
        return TableStats(
            total_items=base.total_items,
            visible_start=base.visible_start,
            visible_end=base.visible_end,
            viewport_height=base.viewport_height,
            buffer_size=base.buffer_size,
            render_start=base.render_start,
            render_end=base.render_end,
            cache_size=base.cache_size,
            scroll_velocity=base.scroll_velocity,
            selected_index=self._selected_index,
            horizontal_offset=self._horizontal_offset,
            wrap=self._wrap,
        )


__all__ = ["TableEngine", "TableStats"]
