"""Viewport manager for the virtualized table.

Tracks which slice of a large row set is on screen, which slice should be
rendered (visible rows plus a buffer), a bounded cache of rendered rows,
scroll velocity, and a scroll-end notification delivered after a short
quiescence period.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from kubewatch.constants.defaults import BUFFER_SIZE_DEFAULT
from kubewatch.constants.limits import MIN_VIEWPORT_HEIGHT, RENDER_CACHE_SIZE
from kubewatch.constants.timeouts import SCROLL_END_QUIESCENCE
from kubewatch.engine.debounce import Debouncer, Scheduler

logger = logging.getLogger(__name__)

EMPTY_RANGE: tuple[int, int] = (0, -1)


@dataclass(frozen=True)
class ViewportStats:
    """Snapshot of viewport state for status lines and diagnostics."""

    total_items: int
    visible_start: int
    visible_end: int
    viewport_height: int
    buffer_size: int
    render_start: int = 0
    render_end: int = -1
    cache_size: int = 0
    scroll_velocity: float = 0.0


class RenderCache:
    """Row index -> rendered output, evicted in insertion order.

    Each entry carries a signature of the inputs it was rendered from so a
    refreshed row at the same index is never served stale.
    """

    def __init__(self, capacity: int = RENDER_CACHE_SIZE) -> None:
        self._capacity = max(1, capacity)
        self._entries: dict[int, tuple[Hashable, Any]] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, index: object) -> bool:
        return index in self._entries

    def put(self, index: int, rendered: Any, signature: Hashable = None) -> None:
        # Re-inserting an index keeps its original eviction slot.
        self._entries[index] = (signature, rendered)
        while len(self._entries) > self._capacity:
            oldest = next(iter(self._entries))
            del self._entries[oldest]

    def get(self, index: int, signature: Hashable = None) -> Any | None:
        entry = self._entries.get(index)
        if entry is None:
            return None
        cached_signature, rendered = entry
        if cached_signature != signature:
            return None
        return rendered

    def clear(self) -> None:
        self._entries.clear()


class ViewportManager:
    """Owns the ViewportState of one table.

    All range and cache state is guarded by a single re-entrant lock.
    Callbacks run synchronously on the caller's thread, except the scroll-end
    callback which is delivered through the debouncer's scheduler.
    """

    def __init__(
        self,
        viewport_height: int = MIN_VIEWPORT_HEIGHT,
        buffer_size: int = BUFFER_SIZE_DEFAULT,
        cache_size: int = RENDER_CACHE_SIZE,
        scroll_end_delay: float = SCROLL_END_QUIESCENCE,
        clock: Callable[[], float] = time.monotonic,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._total_items = 0
        self._viewport_height = max(MIN_VIEWPORT_HEIGHT, viewport_height)
        self._buffer_size = max(0, buffer_size)
        self._viewport_start = 0
        self._cache = RenderCache(cache_size)
        self._clock = clock

        # Two most recent scroll events as (position, timestamp).
        self._previous_scroll: tuple[int, float] | None = None
        self._last_scroll: tuple[int, float] | None = None

        self._on_viewport_change: Callable[[int], None] | None = None
        self._scroll_end = Debouncer(None, delay=scroll_end_delay, scheduler=scheduler)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def viewport_height(self) -> int:
        return self._viewport_height

    @property
    def viewport_start(self) -> int:
        return self._viewport_start

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    @property
    def last_scroll_timestamp(self) -> float | None:
        return self._last_scroll[1] if self._last_scroll else None

    @property
    def cache(self) -> RenderCache:
        return self._cache

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_total_items(self, total: int, position: int | None = None) -> None:
        """Update the item count and re-clamp the viewport start.

        When ``position`` is given the start moves there in the same step,
        so observers hear about the final start only.
        """
        with self._lock:
            self._total_items = max(0, total)
            target = self._viewport_start if position is None else position
            changed = self._set_start(target)
        self._notify(changed)

    def set_viewport_height(self, height: int) -> None:
        """Update the viewport height; heights below 1 are treated as 1."""
        with self._lock:
            self._viewport_height = max(MIN_VIEWPORT_HEIGHT, height)

    def set_scheduler(self, scheduler: Scheduler | None) -> None:
        """Deliver scroll-end callbacks through ``scheduler``."""
        self._scroll_end.set_scheduler(scheduler)

    def scroll_to(self, position: int) -> None:
        """Move the viewport start to ``position`` (clamped).

        Records the scroll event for velocity tracking and re-arms the
        scroll-end timer.
        """
        now = self._clock()
        with self._lock:
            changed = self._set_start(position)
            self._previous_scroll = self._last_scroll
            self._last_scroll = (self._viewport_start, now)
        self._notify(changed)
        self._scroll_end.trigger()

    def scroll_by(self, delta: int) -> None:
        with self._lock:
            target = self._viewport_start + delta
        self.scroll_to(target)

    def reposition(self, position: int) -> None:
        """Move the viewport start without counting it as a user scroll."""
        with self._lock:
            changed = self._set_start(position)
        self._notify(changed)

    def _set_start(self, position: int) -> int | None:
        """Clamp and store the start; return the new value if it changed."""
        upper = max(0, self._total_items - 1)
        clamped = min(max(position, 0), upper)
        if clamped == self._viewport_start:
            return None
        self._viewport_start = clamped
        return clamped

    def _notify(self, changed: int | None) -> None:
        callback = self._on_viewport_change
        if changed is not None and callback is not None:
            callback(changed)

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------

    def get_visible_range(self) -> tuple[int, int]:
        """Return the inclusive ``(start, end)`` of rows on screen.

        ``(0, -1)`` when there are no items.
        """
        with self._lock:
            n = self._total_items
            if n == 0:
                return EMPTY_RANGE
            if n <= self._viewport_height:
                return (0, n - 1)
            start = self._viewport_start
            return (start, min(start + self._viewport_height - 1, n - 1))

    def get_render_range(self) -> tuple[int, int]:
        """Return the visible range widened by ``buffer_size`` on each side."""
        with self._lock:
            start, end = self.get_visible_range()
            if end < start:
                return EMPTY_RANGE
            return (
                max(0, start - self._buffer_size),
                min(self._total_items - 1, end + self._buffer_size),
            )

    def is_item_visible(self, index: int) -> bool:
        start, end = self.get_visible_range()
        return start <= index <= end

    def should_render_item(self, index: int) -> bool:
        start, end = self.get_render_range()
        return start <= index <= end

    # ------------------------------------------------------------------
    # Render cache
    # ------------------------------------------------------------------

    def cache_rendered_item(self, index: int, rendered: Any, signature: Hashable = None) -> None:
        with self._lock:
            self._cache.put(index, rendered, signature)

    def get_cached_item(self, index: int, signature: Hashable = None) -> Any | None:
        with self._lock:
            return self._cache.get(index, signature)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    # ------------------------------------------------------------------
    # Callbacks and velocity
    # ------------------------------------------------------------------

    def set_on_scroll_end(self, callback: Callable[[], None] | None) -> None:
        self._scroll_end.set_callback(callback)

    def set_on_viewport_change(self, callback: Callable[[int], None] | None) -> None:
        self._on_viewport_change = callback

    def get_scroll_velocity(self) -> float:
        """Rows per second between the two most recent scroll events."""
        with self._lock:
            if self._previous_scroll is None or self._last_scroll is None:
                return 0.0
            previous_pos, previous_time = self._previous_scroll
            last_pos, last_time = self._last_scroll
            elapsed = last_time - previous_time
            if elapsed <= 0:
                return 0.0
            return abs(last_pos - previous_pos) / elapsed

    def cancel_pending(self) -> None:
        """Cancel a pending scroll-end notification."""
        self._scroll_end.cancel()

    def get_stats(self) -> ViewportStats:
        with self._lock:
            visible_start, visible_end = self.get_visible_range()
            render_start, render_end = self.get_render_range()
            return ViewportStats(
                total_items=self._total_items,
                visible_start=visible_start,
                visible_end=visible_end,
                viewport_height=self._viewport_height,
                buffer_size=self._buffer_size,
                render_start=render_start,
                render_end=render_end,
                cache_size=len(self._cache),
                scroll_velocity=self.get_scroll_velocity(),
            )


__all__ = ["EMPTY_RANGE", "RenderCache", "ViewportManager", "ViewportStats"]
