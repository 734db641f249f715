"""Widgets module for the KubeWatch TUI.

This module provides all reusable widgets organized into submodules:
- data: Data display widgets (ResourceTable)
- display: Display widgets (StatusLine)
"""

from kubewatch.widgets.data import ResourceTable
from kubewatch.widgets.display import StatusLine

__all__ = [
    "ResourceTable",
    "StatusLine",
]
