"""KubeWatch TUI Screens.

Domain Structure:
    - resources/ - Live resource table
    - mixins/    - Reusable screen mixins

Note: Keybindings are in the keyboard/ package.
"""

from __future__ import annotations

from kubewatch.screens.mixins import WorkerMixin
from kubewatch.screens.resources import ResourceScreen

__all__ = [
    "ResourceScreen",
    "WorkerMixin",
]
