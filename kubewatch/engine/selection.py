"""Selection reconciliation across wholesale row-set refreshes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from kubewatch.constants.defaults import CONTEXT_ROWS_DEFAULT
from kubewatch.constants.limits import MIN_VIEWPORT_HEIGHT
from kubewatch.models.table.row import Row


@dataclass(frozen=True)
class SelectionState:
    """Selected row index and viewport start after reconciliation."""

    selected_index: int = 0
    viewport_start: int = 0


def find_identity(rows: Sequence[Row], identity: str | None) -> int | None:
    """Return the index of the row with ``identity``, if present."""
    if identity is None:
        return None
    for index, row in enumerate(rows):
        if row.identity == identity:
            return index
    return None


def reconcile(
    new_rows: Sequence[Row],
    previous_identity: str | None,
    previous_index: int,
    previous_viewport_start: int,
    viewport_height: int,
    context_rows: int = CONTEXT_ROWS_DEFAULT,
) -> SelectionState:
    """Re-derive selection and viewport start for a freshly fetched row set.

    The previously selected row is followed by identity wherever it moved.
    When it is gone the selection stays at the same index if that still
    exists, otherwise it falls back to the last row. The viewport is then
    scrolled as little as possible to keep the selection on screen, and
    re-centered to show ``context_rows`` rows above the selection when that
    fits entirely within the row set.

    Args:
        new_rows: The replacement rows, in display order.
        previous_identity: Identity of the row selected before the refresh.
        previous_index: Selected index before the refresh.
        previous_viewport_start: Viewport start before the refresh.
        viewport_height: Number of rows on screen (values below 1 mean 1).
        context_rows: Rows of context kept above the selection.

    Returns:
        The reconciled SelectionState; ``(0, 0)`` for an empty row set.
    """
    total = len(new_rows)
    if total == 0:
        return SelectionState(0, 0)

    height = max(MIN_VIEWPORT_HEIGHT, viewport_height)

    selected = find_identity(new_rows, previous_identity)
    if selected is None:
        if 0 <= previous_index < total:
            selected = previous_index
        else:
            selected = total - 1

    start = min(max(previous_viewport_start, 0), max(0, total - height))
    if selected < start:
        start = selected
    elif selected >= start + height:
        start = selected - height + 1

    if height > 2 * context_rows:
        ideal = selected - context_rows
        if ideal >= 0 and ideal + height <= total:
            start = ideal

    return SelectionState(selected_index=selected, viewport_start=start)


__all__ = ["SelectionState", "find_identity", "reconcile"]
