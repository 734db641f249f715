"""Table data models: rows, column specs and themes."""

from kubewatch.models.table.column import ColumnSpec, FixedWidth, FlexWidth
from kubewatch.models.table.row import Row, RowSet
from kubewatch.models.table.theme import (
    DARK_THEME,
    DEFAULT_THEME,
    LIGHT_THEME,
    TableTheme,
    get_theme,
)

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "LIGHT_THEME",
    "ColumnSpec",
    "FixedWidth",
    "FlexWidth",
    "Row",
    "RowSet",
    "TableTheme",
    "get_theme",
]
