"""Resource table keyboard bindings.

Navigation keys move the selection; the viewport follows it.
"""

from textual.binding import Binding

# ============================================================================
# Table navigation
# ============================================================================

TABLE_BINDINGS: list[Binding] = [
    Binding("up,k", "cursor_up", "Up", show=False),
    Binding("down,j", "cursor_down", "Down", show=False),
    Binding("pageup", "page_up", "Page Up", show=False),
    Binding("pagedown", "page_down", "Page Down", show=False),
    Binding("home,g", "scroll_home", "Top", show=False),
    Binding("end,G", "scroll_end", "Bottom", show=False),
    Binding("left", "scroll_left", "Left", show=False),
    Binding("right", "scroll_right", "Right", show=False),
    Binding("u", "toggle_wrap", "Wrap"),
]

__all__ = [
    "TABLE_BINDINGS",
]
