"""Row renderer: fits cell text into column widths and styles each line.

Widths are measured in terminal cells (``rich.cells``), so wide characters
are never split across a column boundary. The renderer holds no state; the
table engine passes in columns, widths and the active theme on every call.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from rich.cells import cell_len, get_character_cell_size
from rich.text import Text

from kubewatch.constants.enums import Align, TruncatePolicy
from kubewatch.constants.values import COLUMN_SEPARATOR, ELLIPSIS
from kubewatch.models.table.column import ColumnSpec
from kubewatch.models.table.row import Row
from kubewatch.models.table.theme import TableTheme

ELLIPSIS_WIDTH = cell_len(ELLIPSIS)


# =============================================================================
# Cell fitting
# =============================================================================


def _head(text: str, cells: int) -> str:
    """Longest prefix of ``text`` that fits in ``cells``."""
    used = 0
    for position, char in enumerate(text):
        size = get_character_cell_size(char)
        if used + size > cells:
            return text[:position]
        used += size
    return text


def _tail(text: str, cells: int) -> str:
    """Longest suffix of ``text`` that fits in ``cells``."""
    used = 0
    for position in range(len(text) - 1, -1, -1):
        size = get_character_cell_size(text[position])
        if used + size > cells:
            return text[position + 1 :]
        used += size
    return text


def truncate(text: str, width: int, policy: TruncatePolicy = TruncatePolicy.END) -> str:
    """Shorten ``text`` to at most ``width`` cells, marking the cut with an ellipsis.

    Args:
        text: Cell content.
        width: Target width in cells.
        policy: Which part of the text is replaced by the ellipsis.

    Returns:
        ``text`` unchanged when it fits; otherwise the kept prefix, suffix or
        head and tail joined by the ellipsis. A width of 1 yields the
        ellipsis alone and widths below 1 yield an empty string.
    """
    if width <= 0:
        return ""
    if cell_len(text) <= width:
        return text
    if width <= ELLIPSIS_WIDTH:
        return ELLIPSIS
    keep = width - ELLIPSIS_WIDTH
    if policy is TruncatePolicy.START:
        return ELLIPSIS + _tail(text, keep)
    if policy is TruncatePolicy.MIDDLE:
        tail_cells = keep // 2
        head_cells = keep - tail_cells
        return _head(text, head_cells) + ELLIPSIS + _tail(text, tail_cells)
    return _head(text, keep) + ELLIPSIS


def align(text: str, width: int, alignment: Align = Align.LEFT) -> str:
    """Pad ``text`` with spaces to ``width`` cells; longer text is returned as is."""
    gap = width - cell_len(text)
    if gap <= 0:
        return text
    if alignment is Align.RIGHT:
        return " " * gap + text
    if alignment is Align.CENTER:
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


def fit_cell(text: str, width: int, column: ColumnSpec, wrap: bool = False) -> str:
    """Truncate (unless ``wrap``) and align one cell to its column width."""
    if not wrap:
        text = truncate(text, width, column.truncate)
    return align(text, width, column.align)


# =============================================================================
# Line rendering
# =============================================================================


def row_base_style(row: Row, index: int, theme: TableTheme, selected: bool) -> str:
    """Resolve the whole-line style for ``row``."""
    if selected:
        return theme.selected_style
    style = theme.alternate_style if index % 2 else theme.row_style
    if row.style:
        style = f"{style} {row.style}".strip()
    return style


def row_signature(
    row: Row,
    selected: bool,
    wrap: bool = False,
) -> Hashable:
    """Key identifying everything a rendered row depends on besides layout."""
    return (row.identity, row.values, row.style, row.cell_styles, selected, wrap)


def render_header(
    columns: Sequence[ColumnSpec],
    widths: Sequence[int],
    theme: TableTheme,
    wrap: bool = False,
) -> Text:
    """Render column titles with the same widths and alignment as the rows."""
    line = Text(style=theme.header_style, no_wrap=True, end="")
    for position, (column, width) in enumerate(zip(columns, widths)):
        if position:
            line.append(COLUMN_SEPARATOR)
        line.append(fit_cell(column.title, width, column, wrap))
    return line


def render_row(
    row: Row,
    index: int,
    columns: Sequence[ColumnSpec],
    widths: Sequence[int],
    theme: TableTheme,
    *,
    selected: bool = False,
    wrap: bool = False,
) -> Text:
    """Render one row as a single styled line.

    Semantic cell styles (status colors, metric thresholds) are applied per
    cell unless the row is selected, in which case the selection style wins
    across the whole line.
    """
    line = Text(style=row_base_style(row, index, theme, selected), no_wrap=True, end="")
    for position, (column, width) in enumerate(zip(columns, widths)):
        if position:
            line.append(COLUMN_SEPARATOR)
        cell = fit_cell(row.value_at(position), width, column, wrap)
        cell_style = None if selected else row.cell_style_at(position)
        line.append(cell, style=cell_style)
    return line


def render_message(message: str, width: int, style: str = "") -> Text:
    """Render a centered single-line message such as the empty-table notice."""
    return Text(align(truncate(message, width), width, Align.CENTER), style=style, end="")


__all__ = [
    "ELLIPSIS_WIDTH",
    "align",
    "fit_cell",
    "render_header",
    "render_message",
    "render_row",
    "row_base_style",
    "row_signature",
    "truncate",
]
