"""Row models delivered to the table engine on every refresh."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field


class Row(BaseModel):
    """One renderable record with a stable identity and ordered display cells.

    ``identity`` is unique within a RowSet and stable across refreshes
    (context/namespace/name). ``cell_styles`` holds optional semantic styles
    (status coloring, metric thresholds) aligned with ``values``.
    """

    model_config = ConfigDict(frozen=True)

    identity: str
    values: tuple[str, ...] = ()
    style: str | None = None
    cell_styles: tuple[str | None, ...] = ()

    def value_at(self, index: int) -> str:
        """Return the cell text at ``index`` or an empty string."""
        if 0 <= index < len(self.values):
            return self.values[index]
        return ""

    def cell_style_at(self, index: int) -> str | None:
        """Return the semantic style for the cell at ``index``, if any."""
        if 0 <= index < len(self.cell_styles):
            return self.cell_styles[index]
        return None


class RowSet(BaseModel):
    """Ordered, wholesale-replaced snapshot of rows for one refresh."""

    model_config = ConfigDict(frozen=True)

    rows: tuple[Row, ...] = Field(default_factory=tuple)

    @classmethod
    def of(cls, rows: Sequence[Row]) -> RowSet:
        return cls(rows=tuple(rows))

    def __len__(self) -> int:
        return len(self.rows)

    def identities(self) -> list[str]:
        return [row.identity for row in self.rows]


__all__ = [
    "Row",
    "RowSet",
]
