"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "default"
REFRESH_INTERVAL_DEFAULT: Final = 5
NAMESPACE_DEFAULT: Final = "default"
RESOURCE_TYPE_DEFAULT: Final = "pods"

# ============================================================================
# Table engine defaults
# ============================================================================

BUFFER_SIZE_DEFAULT: Final = 5
CONTEXT_ROWS_DEFAULT: Final = 3
HORIZONTAL_SCROLL_STEP_DEFAULT: Final = 5
SHOW_HEADER_DEFAULT: Final = True

__all__ = [
    "BUFFER_SIZE_DEFAULT",
    "CONTEXT_ROWS_DEFAULT",
    "HORIZONTAL_SCROLL_STEP_DEFAULT",
    "NAMESPACE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "RESOURCE_TYPE_DEFAULT",
    "SHOW_HEADER_DEFAULT",
    "THEME_DEFAULT",
]
