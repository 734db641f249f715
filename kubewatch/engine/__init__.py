"""Virtualized table engine.

Layout, viewport, selection reconciliation, rendering and refresh
sequencing for large, frequently refreshed tables.
"""

from kubewatch.engine.debounce import Debouncer
from kubewatch.engine.layout import compute_widths
from kubewatch.engine.refresh import (
    RefreshComplete,
    RefreshFailed,
    RefreshSequencer,
    RefreshTracker,
)
from kubewatch.engine.selection import SelectionState, reconcile
from kubewatch.engine.table import TableEngine, TableStats
from kubewatch.engine.viewport import RenderCache, ViewportManager, ViewportStats

__all__ = [
    "Debouncer",
    "RefreshComplete",
    "RefreshFailed",
    "RefreshSequencer",
    "RefreshTracker",
    "RenderCache",
    "SelectionState",
    "TableEngine",
    "TableStats",
    "ViewportManager",
    "ViewportStats",
    "compute_widths",
    "reconcile",
]
