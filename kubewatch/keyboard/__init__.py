"""Keyboard bindings module.

This module provides all keyboard bindings for the KubeWatch TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS), forwarded to the active screen
- tables: Resource table bindings (TABLE_BINDINGS)
"""

from kubewatch.keyboard.app import APP_BINDINGS
from kubewatch.keyboard.tables import TABLE_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "TABLE_BINDINGS",
]
