"""Tests for pod, deployment and statefulset row builders."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from kubewatch.builders import get_builder
from kubewatch.builders.base import BuildScope
from kubewatch.builders.workloads import (
    DeploymentRowBuilder,
    PodRowBuilder,
    StatefulSetRowBuilder,
)
from kubewatch.constants.enums import ResourceType

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def _pod(
    name: str = "web-0",
    namespace: str = "default",
    phase: str = "Running",
    container_statuses: list | None = None,
    **extra,
) -> dict:
    pod = {
        "metadata": {
            "name": name,
            "namespace": namespace,
            "creationTimestamp": "2024-06-01T11:55:00Z",
        },
        "spec": {"nodeName": "node-a"},
        "status": {
            "phase": phase,
            "podIP": "10.0.0.7",
            "containerStatuses": container_statuses
            if container_statuses is not None
            else [{"name": "app", "ready": True, "restartCount": 0, "state": {"running": {}}}],
        },
    }
    for key, value in extra.items():
        pod[key].update(value)
    return pod


# =============================================================================
# Pods
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestPodRowBuilder:
    """Tests for PodRowBuilder."""

    @pytest.fixture
    def builder(self) -> PodRowBuilder:
        return PodRowBuilder()

    def test_columns_without_namespace(self, builder: PodRowBuilder) -> None:
        titles = [c.title for c in builder.columns(show_namespace=False)]

        assert titles == [
            "NAME", "READY", "STATUS", "RESTARTS", "AGE", "CPU", "MEMORY", "IP", "NODE",
        ]

    def test_columns_with_namespace_and_context(self, builder: PodRowBuilder) -> None:
        titles = [c.title for c in builder.columns(show_namespace=True, show_context=True)]

        assert titles[:3] == ["NAME", "CONTEXT", "NAMESPACE"]

    def test_row_values(self, builder: PodRowBuilder) -> None:
        row = builder.build_row(_pod(), BuildScope(now=NOW))

        assert row.identity == "default/web-0"
        assert row.values == ("web-0", "1/1", "Running", "0", "5m", "-", "-", "10.0.0.7", "node-a")

    def test_row_values_align_with_columns(self, builder: PodRowBuilder) -> None:
        scope = BuildScope(show_namespace=True, context="prod", now=NOW)

        row = builder.build_row(_pod(), scope)

        assert len(row.values) == len(builder.columns(True, True))
        assert row.identity == "prod/default/web-0"
        assert row.values[1:3] == ("prod", "default")

    def test_status_and_restart_styles(self, builder: PodRowBuilder) -> None:
        row = builder.build_row(_pod(), BuildScope(now=NOW))

        assert row.cell_style_at(2) == "green"
        assert row.cell_style_at(3) == "grey50"
        assert row.cell_style_at(5) == "grey50"

    def test_waiting_reason_overrides_phase(self, builder: PodRowBuilder) -> None:
        statuses = [
            {
                "ready": False,
                "restartCount": 7,
                "state": {"waiting": {"reason": "CrashLoopBackOff"}},
                "lastState": {"terminated": {"finishedAt": "2024-06-01T11:58:00Z"}},
            }
        ]

        row = builder.build_row(_pod(container_statuses=statuses), BuildScope(now=NOW))

        assert row.values[1] == "0/1"
        assert row.values[2] == "CrashLoopBackOff"
        assert row.values[3] == "7 (2m ago)"
        assert row.cell_style_at(2) == "red"
        assert row.cell_style_at(3) == "red"

    def test_ready_condition_reason(self, builder: PodRowBuilder) -> None:
        pod = _pod(container_statuses=[])
        pod["status"]["conditions"] = [
            {"type": "Ready", "status": "False", "reason": "PodCompleted"}
        ]

        assert PodRowBuilder.pod_status(pod) == "PodCompleted"

    def test_deleting_pod_is_terminating(self, builder: PodRowBuilder) -> None:
        pod = _pod(metadata={"deletionTimestamp": "2024-06-01T11:59:00Z"})

        row = builder.build_row(pod, BuildScope(now=NOW))

        assert row.values[2] == "Terminating"
        assert row.cell_style_at(2) == "magenta"

    def test_pending_without_ip_or_node(self, builder: PodRowBuilder) -> None:
        pod = _pod(phase="Pending", container_statuses=[])
        pod["status"].pop("podIP")
        pod["spec"].pop("nodeName")

        row = builder.build_row(pod, BuildScope(now=NOW))

        assert row.values[1] == "0/0"
        assert row.values[2] == "Pending"
        assert row.cell_style_at(2) == "yellow"
        assert row.values[-2:] == ("-", "-")

    def test_metrics_lookup_and_thresholds(self, builder: PodRowBuilder) -> None:
        metrics = {("default", "web-0"): ("250m", "600Mi")}

        row = builder.build_row(_pod(), BuildScope(now=NOW, metrics=metrics))

        assert row.values[5:7] == ("250m", "600Mi")
        assert row.cell_style_at(5) == "yellow"
        assert row.cell_style_at(6) == "red"

    def test_build_rows_skips_items_without_name(self, builder: PodRowBuilder) -> None:
        items = [_pod("a"), {"metadata": {}}, _pod("b")]

        rows = builder.build_rows(items, BuildScope(now=NOW))

        assert [r.identity for r in rows] == ["default/a", "default/b"]


# =============================================================================
# Deployments and StatefulSets
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestControllerRowBuilders:
    """Tests for DeploymentRowBuilder and StatefulSetRowBuilder."""

    @pytest.fixture
    def deployment(self) -> dict:
        return {
            "metadata": {
                "name": "api",
                "namespace": "shop",
                "creationTimestamp": "2024-05-29T12:00:00Z",
            },
            "spec": {
                "replicas": 3,
                "selector": {"matchLabels": {"tier": "web", "app": "api"}},
                "template": {
                    "spec": {
                        "containers": [
                            {"name": "api", "image": "shop/api:1.2"},
                            {"name": "proxy", "image": "envoy:1.29"},
                        ]
                    }
                },
            },
            "status": {"readyReplicas": 2, "updatedReplicas": 3, "availableReplicas": 2},
        }

    def test_deployment_row(self, deployment: dict) -> None:
        row = DeploymentRowBuilder().build_row(deployment, BuildScope(now=NOW))

        assert row.values == (
            "api",
            "2/3",
            "3",
            "2",
            "3d",
            "api,proxy",
            "shop/api:1.2,envoy:1.29",
            "app=api,tier=web",
        )

    def test_deployment_without_status(self, deployment: dict) -> None:
        deployment["status"] = {}

        row = DeploymentRowBuilder().build_row(deployment, BuildScope(now=NOW))

        assert row.values[1:4] == ("0/3", "0", "0")

    def test_statefulset_row(self, deployment: dict) -> None:
        row = StatefulSetRowBuilder().build_row(deployment, BuildScope(now=NOW))

        assert row.values == ("api", "2/3", "3d", "api,proxy", "shop/api:1.2,envoy:1.29")
        assert len(row.values) == len(StatefulSetRowBuilder().columns())


@pytest.mark.unit
@pytest.mark.fast
class TestBuilderRegistry:
    """Tests for get_builder."""

    @pytest.mark.parametrize("resource_type", list(ResourceType))
    def test_every_resource_type_has_builder(self, resource_type: ResourceType) -> None:
        builder = get_builder(resource_type)

        assert builder.resource_type is resource_type

    def test_lookup_by_value(self) -> None:
        assert isinstance(get_builder("pods"), PodRowBuilder)

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ValueError):
            get_builder("cronjobs")
