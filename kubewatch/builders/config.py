"""Row builders for configmaps and secrets."""

from __future__ import annotations

from typing import Any

from kubewatch.builders.base import BuildScope, Cell, RowBuilder, num_column
from kubewatch.constants.enums import ResourceType
from kubewatch.models.table.column import ColumnSpec
from kubewatch.utils.formatting import format_age


def data_count(item: dict[str, Any]) -> int:
    """Number of keys across ``data`` and ``binaryData``."""
    return len(item.get("data") or {}) + len(item.get("binaryData") or {})


class ConfigMapRowBuilder(RowBuilder):
    resource_type = ResourceType.CONFIGMAP

    def resource_columns(self) -> list[ColumnSpec]:
        return [num_column("DATA", 5), num_column("AGE", 5)]

    def resource_cells(self, item: dict[str, Any], scope: BuildScope) -> list[Cell]:
        return [
            (str(data_count(item)), None),
            (format_age(item.get("metadata", {}).get("creationTimestamp"), scope.now), None),
        ]


class SecretRowBuilder(RowBuilder):
    resource_type = ResourceType.SECRET

    def resource_columns(self) -> list[ColumnSpec]:
        return [
            ColumnSpec.flex("TYPE", max_width=40),
            num_column("DATA", 5),
            num_column("AGE", 5),
        ]

    def resource_cells(self, item: dict[str, Any], scope: BuildScope) -> list[Cell]:
        return [
            (item.get("type", ""), None),
            (str(data_count(item)), None),
            (format_age(item.get("metadata", {}).get("creationTimestamp"), scope.now), None),
        ]


__all__ = ["ConfigMapRowBuilder", "SecretRowBuilder", "data_count"]
