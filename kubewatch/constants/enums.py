"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Resource Enums
# =============================================================================

class ResourceType(Enum):
    """Kubernetes resource types the dashboard can list."""

    POD = "pods"
    DEPLOYMENT = "deployments"
    STATEFULSET = "statefulsets"
    SERVICE = "services"
    INGRESS = "ingresses"
    CONFIGMAP = "configmaps"
    SECRET = "secrets"


class PodPhase(Enum):
    """Pod status values shown in the STATUS column."""

    RUNNING = "Running"
    PENDING = "Pending"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


# =============================================================================
# Table Enums
# =============================================================================

class Align(Enum):
    """Horizontal alignment of a table column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TruncatePolicy(Enum):
    """Where an overlong cell is cut when it does not fit its column."""

    END = "end"
    MIDDLE = "middle"
    START = "start"


# =============================================================================
# Theme Enums
# =============================================================================

class ThemeMode(Enum):
    """Table theme names."""

    DEFAULT = "default"
    DARK = "dark"
    LIGHT = "light"
