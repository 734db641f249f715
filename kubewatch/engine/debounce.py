"""Cancellable quiescence timer delivered on the event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from kubewatch.constants.timeouts import SCROLL_END_QUIESCENCE

logger = logging.getLogger(__name__)

# (delay, callback) -> handle with ``stop()`` (Textual Timer) or ``cancel()``
# (asyncio TimerHandle), or None when nothing could be scheduled.
Scheduler = Callable[[float, Callable[[], None]], Any]


def loop_scheduler(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle | None:
    """Schedule ``callback`` on the running asyncio loop.

    Returns None when called outside of a running loop; the engine is then
    being driven synchronously (tests, headless use) and there is nothing to
    deliver the timer on.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.debug("No running event loop; debounce callback not scheduled")
        return None
    return loop.call_later(delay, callback)


def _cancel_handle(handle: Any) -> None:
    if handle is None:
        return
    stop = getattr(handle, "stop", None)
    if callable(stop):
        stop()
        return
    cancel = getattr(handle, "cancel", None)
    if callable(cancel):
        cancel()


class Debouncer:
    """Invoke a callback once after ``delay`` seconds without new triggers.

    Every ``trigger()`` cancels the pending timer and arms a new one, so a
    burst of triggers produces a single callback after the burst ends.
    """

    def __init__(
        self,
        callback: Callable[[], None] | None = None,
        delay: float = SCROLL_END_QUIESCENCE,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._callback = callback
        self._delay = delay
        self._scheduler: Scheduler = scheduler or loop_scheduler
        self._handle: Any = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """True while a timer is armed and has not fired yet."""
        return self._handle is not None

    def set_callback(self, callback: Callable[[], None] | None) -> None:
        self._callback = callback

    def set_delay(self, delay: float) -> None:
        """Change the quiescence delay for subsequent triggers."""
        self._delay = max(0.0, delay)

    def set_scheduler(self, scheduler: Scheduler | None) -> None:
        """Swap the timer source, cancelling any timer armed on the old one."""
        self.cancel()
        self._scheduler = scheduler or loop_scheduler

    def trigger(self) -> None:
        """Re-arm the timer."""
        self.cancel()
        if self._callback is None:
            return
        self._handle = self._scheduler(self._delay, self._fire)

    def cancel(self) -> None:
        """Drop the pending timer without invoking the callback."""
        handle, self._handle = self._handle, None
        _cancel_handle(handle)

    def _fire(self) -> None:
        self._handle = None
        callback = self._callback
        if callback is not None:
            callback()


__all__ = ["Debouncer", "Scheduler", "loop_scheduler"]
