"""Table widgets."""

from kubewatch.widgets.data.tables.resource_table import ResourceTable

__all__ = ["ResourceTable"]
