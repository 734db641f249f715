"""Resource list screens."""

from kubewatch.screens.resources.resource_screen import ResourceScreen

__all__ = ["ResourceScreen"]
