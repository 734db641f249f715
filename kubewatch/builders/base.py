"""Row builder strategy: turns raw ``kubectl -o json`` items into table rows.

Each resource type has one builder providing its column specs and its
per-item cells. The shared NAME / CONTEXT / NAMESPACE leading columns and
row identities are handled here.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar

from kubewatch.constants.enums import Align, ResourceType, TruncatePolicy
from kubewatch.models.table.column import ColumnSpec
from kubewatch.models.table.row import Row

logger = logging.getLogger(__name__)

# (text, semantic style)
Cell = tuple[str, str | None]

# (namespace, pod name) -> (cpu, memory) usage strings
PodMetrics = Mapping[tuple[str, str], tuple[str, str]]


@dataclass(frozen=True)
class BuildScope:
    """What the rows are built for: namespace scope, context and clock."""

    show_namespace: bool = False
    context: str | None = None
    now: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    metrics: PodMetrics | None = None

    @property
    def show_context(self) -> bool:
        return self.context is not None


def num_column(title: str, width: int) -> ColumnSpec:
    """Fixed, right-aligned column for counts and metrics."""
    return ColumnSpec.fixed(title, width, align=Align.RIGHT)


class RowBuilder(ABC):
    """Builds column specs and rows for one resource type."""

    resource_type: ClassVar[ResourceType]

    def columns(self, show_namespace: bool = False, show_context: bool = False) -> list[ColumnSpec]:
        """Column specs in display order for the given scope."""
        leading = [
            ColumnSpec.flex("NAME", min_width=16, truncate=TruncatePolicy.MIDDLE)
        ]
        if show_context:
            leading.append(ColumnSpec.flex("CONTEXT", max_width=20))
        if show_namespace:
            leading.append(ColumnSpec.flex("NAMESPACE", max_width=20))
        return leading + self.resource_columns()

    def build_rows(self, items: Iterable[dict[str, Any]], scope: BuildScope) -> list[Row]:
        """Build one row per item; malformed items are skipped with a warning."""
        rows: list[Row] = []
        for item in items:
            if not isinstance(item, dict) or not item.get("metadata", {}).get("name"):
                logger.warning("Skipping %s item without metadata.name", self.resource_type.value)
                continue
            rows.append(self.build_row(item, scope))
        return rows

    def build_row(self, item: dict[str, Any], scope: BuildScope) -> Row:
        metadata = item.get("metadata", {})
        name = metadata.get("name", "")
        namespace = metadata.get("namespace", "")

        cells: list[Cell] = [(name, None)]
        if scope.show_context:
            cells.append((scope.context or "", None))
        if scope.show_namespace:
            cells.append((namespace, None))
        cells.extend(self.resource_cells(item, scope))

        return Row(
            identity=self.identity(name, namespace, scope.context),
            values=tuple(text for text, _ in cells),
            cell_styles=tuple(style for _, style in cells),
        )

    @staticmethod
    def identity(name: str, namespace: str = "", context: str | None = None) -> str:
        """Stable row identity: ``[context/]namespace/name``."""
        parts = [namespace, name]
        if context is not None:
            parts.insert(0, context)
        return "/".join(parts)

    @abstractmethod
    def resource_columns(self) -> list[ColumnSpec]:
        """Columns after NAME / CONTEXT / NAMESPACE."""
        ...

    @abstractmethod
    def resource_cells(self, item: dict[str, Any], scope: BuildScope) -> list[Cell]:
        """Cells matching ``resource_columns()`` for one item."""
        ...


__all__ = ["BuildScope", "Cell", "PodMetrics", "RowBuilder", "num_column"]
