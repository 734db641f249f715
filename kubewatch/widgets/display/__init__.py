"""Display widgets for KubeWatch TUI.

- StatusLine: resource, scope and refresh age above the table
"""

from kubewatch.widgets.display.status_line import StatusLine, format_status

__all__ = ["StatusLine", "format_status"]
