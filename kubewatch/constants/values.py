"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeWatch"

# ============================================================================
# Table rendering
# ============================================================================

ELLIPSIS: Final = "…"
COLUMN_SEPARATOR: Final = " "
ALL_NAMESPACES: Final = "all"
EMPTY_TABLE_MESSAGE: Final = "No resources found"
REFRESH_NEVER: Final = "Never"

# ============================================================================
# Cell placeholders (kubectl conventions)
# ============================================================================

PLACEHOLDER_DASH: Final = "-"
PLACEHOLDER_NONE: Final = "<none>"

# ============================================================================
# Semantic cell styles (rich style strings)
# ============================================================================

STYLE_OK: Final = "green"
STYLE_WARNING: Final = "yellow"
STYLE_ERROR: Final = "red"
STYLE_INFO: Final = "blue"
STYLE_TERMINATING: Final = "magenta"
STYLE_MUTED: Final = "grey50"

__all__ = [
    "ALL_NAMESPACES",
    "APP_TITLE",
    "COLUMN_SEPARATOR",
    "ELLIPSIS",
    "EMPTY_TABLE_MESSAGE",
    "PLACEHOLDER_DASH",
    "PLACEHOLDER_NONE",
    "REFRESH_NEVER",
    "STYLE_ERROR",
    "STYLE_INFO",
    "STYLE_MUTED",
    "STYLE_OK",
    "STYLE_TERMINATING",
    "STYLE_WARNING",
]
