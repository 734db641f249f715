"""Constants module for KubeWatch TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, styles with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min) and metric thresholds
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in kubewatch.keyboard module.
"""

from kubewatch.constants.defaults import (
    BUFFER_SIZE_DEFAULT,
    CONTEXT_ROWS_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from kubewatch.constants.enums import (
    Align,
    PodPhase,
    ResourceType,
    ThemeMode,
    TruncatePolicy,
)
from kubewatch.constants.limits import (
    MAX_ROWS_DISPLAY,
    REFRESH_INTERVAL_MIN,
    RENDER_CACHE_SIZE,
)
from kubewatch.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    SCROLL_END_QUIESCENCE,
)
from kubewatch.constants.values import (
    ALL_NAMESPACES,
    APP_TITLE,
    ELLIPSIS,
)

__all__ = [
    # Application
    "ALL_NAMESPACES",
    "APP_TITLE",
    # Defaults
    "BUFFER_SIZE_DEFAULT",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "CONTEXT_ROWS_DEFAULT",
    "ELLIPSIS",
    # Limits
    "MAX_ROWS_DISPLAY",
    "NAMESPACE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "RENDER_CACHE_SIZE",
    "SCROLL_END_QUIESCENCE",
    "THEME_DEFAULT",
    # Enums
    "Align",
    "PodPhase",
    "ResourceType",
    "ThemeMode",
    "TruncatePolicy",
]
