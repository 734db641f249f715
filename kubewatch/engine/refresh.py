"""Refresh events and stale-response rejection.

Producers stamp every fetch with a sequence number taken from a
``RefreshSequencer`` before the fetch starts. The table applies an event only
if its sequence is newer than the last one it applied, so a slow response
can never overwrite a fresher one.
"""

from __future__ import annotations

import itertools
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from kubewatch.constants.values import REFRESH_NEVER
from kubewatch.models.table.column import ColumnSpec
from kubewatch.models.table.row import RowSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshComplete:
    """A fetch produced a new row set."""

    sequence: int
    rows: RowSet
    columns: tuple[ColumnSpec, ...] | None = None
    timestamp: float = field(default_factory=time.monotonic)
    # Contexts that failed while others succeeded.
    partial_errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class RefreshFailed:
    """A fetch failed; the last good rows stay on screen."""

    sequence: int
    error: str
    timestamp: float = field(default_factory=time.monotonic)


RefreshEvent = RefreshComplete | RefreshFailed


class RefreshSequencer:
    """Thread-safe source of increasing sequence numbers."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return next(self._counter)


def format_age(seconds: float) -> str:
    """Format an elapsed time as ``Ns``, ``Nm`` or ``Nh``."""
    seconds = max(0, int(seconds))
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m"
    return f"{seconds // 3600}h"


class RefreshTracker:
    """Remembers the last applied sequence and the last successful refresh."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.last_sequence = 0
        self.last_success: float | None = None
        self.last_error: str | None = None
        self.discarded = 0

    def accept(self, event: RefreshEvent) -> bool:
        """Record ``event`` if it is newer than anything applied so far."""
        if event.sequence <= self.last_sequence:
            self.discarded += 1
            logger.debug(
                "Discarding stale %s #%d (last applied #%d)",
                type(event).__name__,
                event.sequence,
                self.last_sequence,
            )
            return False
        self.last_sequence = event.sequence
        if isinstance(event, RefreshComplete):
            self.last_success = self._clock()
            self.last_error = "; ".join(event.partial_errors) or None
        else:
            self.last_error = event.error
        return True

    def age_seconds(self) -> float | None:
        if self.last_success is None:
            return None
        return max(0.0, self._clock() - self.last_success)

    def age_label(self) -> str:
        """``"last refreshed 3s ago"`` or ``"Never"`` before the first success."""
        age = self.age_seconds()
        if age is None:
            return REFRESH_NEVER
        return f"last refreshed {format_age(age)} ago"


__all__ = [
    "RefreshComplete",
    "RefreshEvent",
    "RefreshFailed",
    "RefreshSequencer",
    "RefreshTracker",
    "format_age",
]
