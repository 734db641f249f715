"""Row builders for pods, deployments and statefulsets."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from kubewatch.builders.base import BuildScope, Cell, RowBuilder, num_column
from kubewatch.builders.styles import (
    cpu_style,
    memory_style,
    placeholder_style,
    restarts_style,
    status_style,
)
from kubewatch.constants.enums import PodPhase, ResourceType, TruncatePolicy
from kubewatch.constants.values import PLACEHOLDER_DASH
from kubewatch.models.table.column import ColumnSpec
from kubewatch.utils.formatting import format_age, parse_timestamp


def _containers(item: dict[str, Any]) -> list[dict[str, Any]]:
    return item.get("spec", {}).get("template", {}).get("spec", {}).get("containers", []) or []


def _container_cells(item: dict[str, Any]) -> list[Cell]:
    containers = _containers(item)
    names = ",".join(c.get("name", "") for c in containers)
    images = ",".join(c.get("image", "") for c in containers)
    return [(names, None), (images, None)]


class PodRowBuilder(RowBuilder):
    """Pods: readiness, status, restarts, age, usage metrics, IP and node."""

    resource_type = ResourceType.POD

    def resource_columns(self) -> list[ColumnSpec]:
        return [
            num_column("READY", 7),
            ColumnSpec.fixed("STATUS", 18),
            num_column("RESTARTS", 14),
            num_column("AGE", 5),
            num_column("CPU", 6),
            num_column("MEMORY", 7),
            ColumnSpec.fixed("IP", 15),
            ColumnSpec.flex("NODE", max_width=40, truncate=TruncatePolicy.MIDDLE),
        ]

    def resource_cells(self, item: dict[str, Any], scope: BuildScope) -> list[Cell]:
        metadata = item.get("metadata", {})
        spec = item.get("spec", {})
        status = item.get("status", {})
        statuses = status.get("containerStatuses", []) or []

        ready = sum(1 for cs in statuses if cs.get("ready"))
        pod_status = self.pod_status(item)
        restarts = self.restarts(statuses, scope.now)

        cpu, memory = PLACEHOLDER_DASH, PLACEHOLDER_DASH
        if scope.metrics:
            key = (metadata.get("namespace", ""), metadata.get("name", ""))
            cpu, memory = scope.metrics.get(key, (PLACEHOLDER_DASH, PLACEHOLDER_DASH))

        ip = status.get("podIP") or PLACEHOLDER_DASH
        node = spec.get("nodeName") or PLACEHOLDER_DASH

        return [
            (f"{ready}/{len(statuses)}", None),
            (pod_status, status_style(pod_status)),
            (restarts, restarts_style(restarts)),
            (format_age(metadata.get("creationTimestamp"), scope.now), None),
            (cpu, cpu_style(cpu)),
            (memory, memory_style(memory)),
            (ip, placeholder_style(ip)),
            (node, placeholder_style(node)),
        ]

    @staticmethod
    def pod_status(item: dict[str, Any]) -> str:
        """Most specific status for a pod.

        Starts from the phase, prefers the reason of a non-ready Ready
        condition, then the first waiting/terminated container reason.
        Pods being deleted report Terminating.
        """
        metadata = item.get("metadata", {})
        status = item.get("status", {})
        if metadata.get("deletionTimestamp"):
            return "Terminating"

        result = status.get("phase") or PodPhase.UNKNOWN.value
        for condition in status.get("conditions", []) or []:
            if (
                condition.get("type") == "Ready"
                and condition.get("status") != "True"
                and condition.get("reason")
            ):
                result = condition["reason"]

        for cs in status.get("containerStatuses", []) or []:
            state = cs.get("state", {})
            reason = (state.get("waiting") or {}).get("reason") or (
                state.get("terminated") or {}
            ).get("reason")
            if reason:
                return reason
        return result

    @staticmethod
    def restarts(statuses: list[dict[str, Any]], now: datetime) -> str:
        """Total restart count, with the age of the latest restart when known."""
        count = 0
        last_restart: datetime | None = None
        for cs in statuses:
            count += int(cs.get("restartCount", 0) or 0)
            terminated = (cs.get("lastState") or {}).get("terminated") or {}
            finished = parse_timestamp(terminated.get("finishedAt"))
            if finished and (last_restart is None or finished > last_restart):
                last_restart = finished
        if count > 0 and last_restart is not None:
            return f"{count} ({format_age(last_restart, now)} ago)"
        return str(count)


class DeploymentRowBuilder(RowBuilder):
    """Deployments: replica counts, containers, images and selector."""

    resource_type = ResourceType.DEPLOYMENT

    def resource_columns(self) -> list[ColumnSpec]:
        return [
            num_column("READY", 7),
            num_column("UP-TO-DATE", 10),
            num_column("AVAILABLE", 9),
            num_column("AGE", 5),
            ColumnSpec.flex("CONTAINERS", max_width=30),
            ColumnSpec.flex("IMAGES", truncate=TruncatePolicy.START),
            ColumnSpec.flex("SELECTOR", max_width=40),
        ]

    def resource_cells(self, item: dict[str, Any], scope: BuildScope) -> list[Cell]:
        spec = item.get("spec", {})
        status = item.get("status", {})
        replicas = spec.get("replicas") or 0
        ready = status.get("readyReplicas") or 0
        match_labels = (spec.get("selector") or {}).get("matchLabels") or {}
        selector = ",".join(f"{k}={v}" for k, v in sorted(match_labels.items()))

        return [
            (f"{ready}/{replicas}", None),
            (str(status.get("updatedReplicas") or 0), None),
            (str(status.get("availableReplicas") or 0), None),
            (format_age(item.get("metadata", {}).get("creationTimestamp"), scope.now), None),
            *_container_cells(item),
            (selector, None),
        ]


class StatefulSetRowBuilder(RowBuilder):
    """StatefulSets: ready replicas, containers and images."""

    resource_type = ResourceType.STATEFULSET

    def resource_columns(self) -> list[ColumnSpec]:
        return [
            num_column("READY", 7),
            num_column("AGE", 5),
            ColumnSpec.flex("CONTAINERS", max_width=30),
            ColumnSpec.flex("IMAGES", truncate=TruncatePolicy.START),
        ]

    def resource_cells(self, item: dict[str, Any], scope: BuildScope) -> list[Cell]:
        replicas = item.get("spec", {}).get("replicas") or 0
        ready = item.get("status", {}).get("readyReplicas") or 0
        return [
            (f"{ready}/{replicas}", None),
            (format_age(item.get("metadata", {}).get("creationTimestamp"), scope.now), None),
            *_container_cells(item),
        ]


__all__ = ["DeploymentRowBuilder", "PodRowBuilder", "StatefulSetRowBuilder"]
