"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_ROWS_DISPLAY: Final = 1000
RENDER_CACHE_SIZE: Final = 1000
MIN_VIEWPORT_HEIGHT: Final = 1

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1
BUFFER_SIZE_MIN: Final = 0
BUFFER_SIZE_MAX: Final = 100
CACHE_SIZE_MIN: Final = 1

# ============================================================================
# Metric thresholds used for semantic cell coloring
# ============================================================================

CPU_LOW_CORES: Final = 0.1
CPU_MEDIUM_CORES: Final = 0.5
MEMORY_LOW_MI: Final = 128
MEMORY_MEDIUM_MI: Final = 512
RESTARTS_WARNING: Final = 5

__all__ = [
    "BUFFER_SIZE_MAX",
    "BUFFER_SIZE_MIN",
    "CACHE_SIZE_MIN",
    "CPU_LOW_CORES",
    "CPU_MEDIUM_CORES",
    "MAX_ROWS_DISPLAY",
    "MEMORY_LOW_MI",
    "MEMORY_MEDIUM_MI",
    "MIN_VIEWPORT_HEIGHT",
    "REFRESH_INTERVAL_MIN",
    "RENDER_CACHE_SIZE",
    "RESTARTS_WARNING",
]
