"""WorkerMixin - Worker lifecycle management for background refreshes.

This module provides a mixin class that implements consistent patterns for:
- Background worker management using Textual Workers
- Loading state shown on the screen's status line
- Loading duration tracking
- Reactive state management (is_loading, error)

Standard Reactive Pattern:
- Workers set is_loading and error reactive attributes
- on_worker_state_changed updates reactives when a worker ends
- watch_* methods push reactive changes to the status line

WorkerMixin uses Textual's built-in ``self.workers`` (WorkerManager) for
worker lifecycle management.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.css.query import NoMatches, WrongType
from textual.reactive import reactive
from textual.worker import Worker, WorkerState

from kubewatch.widgets import StatusLine

logger = logging.getLogger(__name__)


# ============================================================================
# WorkerMixin Base Class
# ============================================================================


class WorkerMixin:
    """Mixin providing Worker lifecycle management for screens.

    - `start_worker()`: Worker creation with automatic cleanup
    - `cancel_workers()`: Cancel all running workers (uses `self.workers`)
    - `on_worker_state_changed()`: Default handler for worker state changes
    - `show_loading_state()` / `hide_loading_state()`: status line updates
    - Reactive state: is_loading, error

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def on_mount(self) -> None:
                self.start_worker(self._refresh_worker, name="refresh")

            async def _refresh_worker(self) -> None:
                self.is_loading = True
                try:
                    event = await controller.refresh()
                    ...
                finally:
                    self.is_loading = False
        ```

    The status line is looked up as ``#status-line``; screens without one
    simply get no loading indicator.
    """

    is_loading = reactive(False)
    error = reactive[str | None](None)
    loading_duration_ms = reactive(0.0, init=False)

    def __init__(self) -> None:
        super().__init__()
        self._load_start_time: float | None = None
        self._active_worker_name: str | None = None

    def watch_is_loading(self, loading: bool) -> None:
        if loading:
            self.show_loading_state()
        else:
            self.hide_loading_state()

    def watch_error(self, error: str | None) -> None:
        self.show_error_state(error)

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        exclusive: bool = True,
        thread: bool = False,
        name: str | None = None,
        exit_on_error: bool = False,
    ) -> Worker[Any]:
        """Start a worker for a background refresh.

        Args:
            worker_func: Async function to run in worker
            exclusive: If True, cancel previous workers before starting new one
            thread: If False, run in async event loop (kubectl already runs
                in a thread of its own)
            name: Optional worker name for debugging
            exit_on_error: If False, errors don't crash the app

        Returns:
            The Worker instance
        """
        if exclusive:
            with suppress(NoActiveAppError):
                self.workers.cancel_all()  # type: ignore[attr-defined]

        self._load_start_time = time.monotonic()
        self._active_worker_name = name

        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            exclusive=exclusive,
            thread=thread,
            name=name,
            exit_on_error=exit_on_error,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers using Textual's WorkerManager."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        """Cancel all workers when the screen is unmounted."""
        self.cancel_workers()

    def _has_active_worker(self, finished: Worker) -> bool:
        """True if a worker of this screen other than ``finished`` is still pending or running."""
        with suppress(NoActiveAppError):
            return any(
                worker is not finished and worker.node is self and not worker.is_finished
                for worker in self.workers  # type: ignore[attr-defined]
            )
        return False

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker outcomes and clear the loading state.

        A worker that raises is surfaced through the ``error`` reactive;
        it never takes the app down.
        """
        duration_ms = 0.0
        if self._load_start_time is not None and event.state in (
            WorkerState.SUCCESS,
            WorkerState.CANCELLED,
            WorkerState.ERROR,
        ):
            duration_ms = (time.monotonic() - self._load_start_time) * 1000
            self.loading_duration_ms = duration_ms  # type: ignore[attr-defined]
            self._load_start_time = None

        if event.state == WorkerState.CANCELLED:
            logger.debug(f"Worker '{event.worker.name}' was cancelled ({duration_ms:.2f}ms)")
            # An exclusive restart cancels the old worker after the new one started.
            if not self._has_active_worker(event.worker):
                self.is_loading = False  # type: ignore[attr-defined]
        elif event.state == WorkerState.ERROR:
            logger.error(f"Worker '{event.worker.name}' error: {event.worker.error} ({duration_ms:.2f}ms)")
            self.is_loading = False  # type: ignore[attr-defined]
            self.error = str(event.worker.error)  # type: ignore[attr-defined]
        elif event.state == WorkerState.SUCCESS:
            logger.debug(f"Worker '{event.worker.name}' completed successfully ({duration_ms:.2f}ms)")
            self.is_loading = False  # type: ignore[attr-defined]

    # =========================================================================
    # Loading State Management - Default implementations
    # =========================================================================

    def _status_line(self) -> StatusLine | None:
        with suppress(NoMatches, WrongType):
            return self.query_one("#status-line", StatusLine)  # type: ignore[attr-defined]
        return None

    def show_loading_state(self) -> None:
        status = self._status_line()
        if status is not None:
            status.loading = True

    def hide_loading_state(self) -> None:
        status = self._status_line()
        if status is not None:
            status.loading = False

    def show_error_state(self, message: str | None) -> None:
        """Show ``message`` on the status line; None clears it."""
        status = self._status_line()
        if status is not None:
            status.error = message
