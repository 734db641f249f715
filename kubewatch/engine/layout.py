"""Column layout engine.

Computes per-column character widths from fixed/flex column specs and the
available terminal width. Layout never fails: overflow (fixed widths wider
than the terminal) is left to horizontal scrolling, and undersized columns
are truncated by the renderer.
"""

from __future__ import annotations

from collections.abc import Sequence

from kubewatch.constants.values import COLUMN_SEPARATOR
from kubewatch.models.table.column import ColumnSpec, FixedWidth, FlexWidth

SEPARATOR_WIDTH = len(COLUMN_SEPARATOR)


def reserved_width(columns: Sequence[ColumnSpec]) -> int:
    """Return the width taken by fixed columns plus inter-column separators."""
    if not columns:
        return 0
    fixed = sum(col.mode.width for col in columns if isinstance(col.mode, FixedWidth))
    return fixed + SEPARATOR_WIDTH * (len(columns) - 1)


def _split_evenly(total: int, count: int) -> list[int]:
    """Split ``total`` into ``count`` parts, remainder going to the earliest parts."""
    base, extra = divmod(total, count)
    return [base + (1 if i < extra else 0) for i in range(count)]


def _distribute_flex(flex_specs: list[FlexWidth], pool: int) -> list[int]:
    """Share ``pool`` across flex columns honoring max widths.

    Capped columns are pinned at their maximum and the excess is handed to
    the columns that are still uncapped, until no share exceeds its cap.
    """
    shares = [0] * len(flex_specs)
    active = list(range(len(flex_specs)))
    while active:
        tentative = _split_evenly(pool, len(active))
        capped = [
            (slot, idx)
            for slot, idx in enumerate(active)
            if flex_specs[idx].max_width is not None
            and tentative[slot] > flex_specs[idx].max_width
        ]
        if not capped:
            for slot, idx in enumerate(active):
                shares[idx] = tentative[slot]
            break
        for _, idx in capped:
            cap = flex_specs[idx].max_width or 0
            shares[idx] = cap
            pool -= cap
        capped_indices = {idx for _, idx in capped}
        active = [idx for idx in active if idx not in capped_indices]
    return shares


def _enforce_minimums(flex_specs: list[FlexWidth], shares: list[int]) -> list[int]:
    """Raise flex columns to their minimum, borrowing from the last flex column."""
    last = len(shares) - 1
    for idx, spec in enumerate(flex_specs):
        min_width = spec.min_width
        if min_width is None or shares[idx] >= min_width:
            continue
        deficit = min_width - shares[idx]
        shares[idx] = min_width
        # Minimums always win, so a min-bounded last column can push the
        # total past the available width. The widget crops the overflow.
        if idx == last:
            continue
        shares[last] = max(0, shares[last] - deficit)
    return shares


def compute_widths(columns: Sequence[ColumnSpec], available_width: int) -> list[int]:
    """Compute the rendered width of every column.

    Args:
        columns: Column specs in display order.
        available_width: Terminal width available to the table.

    Returns:
        One width per column. Fixed columns always get their declared width.
        Flex columns share ``available_width - reserved_width(columns)`` evenly
        (earliest columns take the integer remainder), clamped to their
        ``[min_width, max_width]`` bounds.
    """
    if not columns:
        return []

    widths = [0] * len(columns)
    flex_positions: list[int] = []
    flex_specs: list[FlexWidth] = []
    for position, column in enumerate(columns):
        if isinstance(column.mode, FixedWidth):
            widths[position] = column.mode.width
        else:
            flex_positions.append(position)
            flex_specs.append(column.mode)

    if not flex_specs:
        return widths

    remaining = max(0, available_width - reserved_width(columns))
    shares = _distribute_flex(flex_specs, remaining)
    shares = _enforce_minimums(flex_specs, shares)
    for position, share in zip(flex_positions, shares):
        widths[position] = share
    return widths


def total_width(widths: Sequence[int]) -> int:
    """Return the rendered line width for ``widths`` including separators."""
    if not widths:
        return 0
    return sum(widths) + SEPARATOR_WIDTH * (len(widths) - 1)


__all__ = [
    "SEPARATOR_WIDTH",
    "compute_widths",
    "reserved_width",
    "total_width",
]
