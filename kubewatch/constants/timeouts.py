"""Timeout constants for the TUI.

All timeout and interval values for API requests, async operations, and refresh cycles.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeout (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45

# ============================================================================
# UI timing (float, in seconds)
# ============================================================================

SCROLL_END_QUIESCENCE: Final = 0.1
STATUS_TICK_INTERVAL: Final = 1.0

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "SCROLL_END_QUIESCENCE",
    "STATUS_TICK_INTERVAL",
]
