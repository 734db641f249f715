"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("t", "cycle_resource", "Resource"),
    Binding("a", "toggle_all_namespaces", "All NS"),
    Binding("T", "cycle_theme", "Theme"),
    Binding("q", "app.quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
