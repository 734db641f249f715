"""Data display widgets."""

from kubewatch.widgets.data.tables import ResourceTable

__all__ = ["ResourceTable"]
