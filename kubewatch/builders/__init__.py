"""Per-resource row builders, selected by ResourceType."""

from kubewatch.builders.base import BuildScope, Cell, PodMetrics, RowBuilder
from kubewatch.builders.config import ConfigMapRowBuilder, SecretRowBuilder
from kubewatch.builders.network import IngressRowBuilder, ServiceRowBuilder
from kubewatch.builders.workloads import (
    DeploymentRowBuilder,
    PodRowBuilder,
    StatefulSetRowBuilder,
)
from kubewatch.constants.enums import ResourceType

_BUILDERS: dict[ResourceType, RowBuilder] = {
    builder.resource_type: builder
    for builder in (
        PodRowBuilder(),
        DeploymentRowBuilder(),
        StatefulSetRowBuilder(),
        ServiceRowBuilder(),
        IngressRowBuilder(),
        ConfigMapRowBuilder(),
        SecretRowBuilder(),
    )
}


def get_builder(resource_type: ResourceType | str) -> RowBuilder:
    """Return the row builder for ``resource_type``.

    Raises:
        ValueError: If the resource type is unknown.
    """
    return _BUILDERS[ResourceType(resource_type)]


__all__ = [
    "BuildScope",
    "Cell",
    "ConfigMapRowBuilder",
    "DeploymentRowBuilder",
    "IngressRowBuilder",
    "PodMetrics",
    "PodRowBuilder",
    "RowBuilder",
    "SecretRowBuilder",
    "ServiceRowBuilder",
    "StatefulSetRowBuilder",
    "get_builder",
]
