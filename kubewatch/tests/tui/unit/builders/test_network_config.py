"""Tests for service, ingress, configmap and secret row builders."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from kubewatch.builders.base import BuildScope
from kubewatch.builders.config import ConfigMapRowBuilder, SecretRowBuilder, data_count
from kubewatch.builders.network import (
    IngressRowBuilder,
    ServiceRowBuilder,
    format_service_port,
)

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
CREATED = "2024-06-01T10:30:00Z"


def _meta(name: str, namespace: str = "default") -> dict:
    return {"name": name, "namespace": namespace, "creationTimestamp": CREATED}


@pytest.mark.unit
@pytest.mark.fast
class TestServiceRowBuilder:
    """Tests for ServiceRowBuilder."""

    @pytest.mark.parametrize(
        ("port", "expected"),
        [
            ({"port": 80}, "80"),
            ({"port": 80, "nodePort": 30080}, "80:30080"),
            ({"port": 53, "protocol": "UDP"}, "53/UDP"),
            ({"port": 443, "protocol": "TCP", "name": "https"}, "443(https)"),
            ({"port": 53, "nodePort": 30053, "protocol": "UDP", "name": "dns"}, "53:30053/UDP(dns)"),
        ],
    )
    def test_format_service_port(self, port: dict, expected: str) -> None:
        assert format_service_port(port) == expected

    def test_cluster_ip_service(self) -> None:
        item = {
            "metadata": _meta("api"),
            "spec": {"type": "ClusterIP", "clusterIP": "10.96.0.12", "ports": [{"port": 8080}]},
            "status": {},
        }

        row = ServiceRowBuilder().build_row(item, BuildScope(now=NOW))

        assert row.values == ("api", "ClusterIP", "10.96.0.12", "<none>", "8080", "1h")

    def test_load_balancer_uses_ingress_addresses(self) -> None:
        item = {
            "metadata": _meta("edge"),
            "spec": {"type": "LoadBalancer", "clusterIP": "10.96.0.20", "ports": []},
            "status": {
                "loadBalancer": {"ingress": [{"ip": "34.1.2.3"}, {"hostname": "lb.example.com"}]}
            },
        }

        row = ServiceRowBuilder().build_row(item, BuildScope(now=NOW))

        assert row.values[3] == "34.1.2.3,lb.example.com"
        assert row.values[4] == "<none>"

    def test_external_ips_take_precedence(self) -> None:
        item = {
            "metadata": _meta("edge"),
            "spec": {"type": "LoadBalancer", "externalIPs": ["1.1.1.1"]},
            "status": {"loadBalancer": {"ingress": [{"ip": "34.1.2.3"}]}},
        }

        row = ServiceRowBuilder().build_row(item, BuildScope(now=NOW))

        assert row.values[2] == "None"
        assert row.values[3] == "1.1.1.1"


@pytest.mark.unit
@pytest.mark.fast
class TestIngressRowBuilder:
    """Tests for IngressRowBuilder."""

    def test_ingress_with_tls(self) -> None:
        item = {
            "metadata": _meta("shop", "web"),
            "spec": {
                "ingressClassName": "nginx",
                "rules": [{"host": "shop.example.com"}, {"http": {}}],
                "tls": [{"hosts": ["shop.example.com"]}],
            },
            "status": {"loadBalancer": {"ingress": [{"hostname": "elb.aws.com"}]}},
        }

        row = IngressRowBuilder().build_row(item, BuildScope(show_namespace=True, now=NOW))

        assert row.values == ("shop", "web", "nginx", "shop.example.com", "elb.aws.com", "80, 443", "1h")

    def test_bare_ingress_placeholders(self) -> None:
        item = {"metadata": _meta("bare"), "spec": {}, "status": {}}

        row = IngressRowBuilder().build_row(item, BuildScope(now=NOW))

        assert row.values[1:5] == ("<none>", "<none>", "<none>", "80")


@pytest.mark.unit
@pytest.mark.fast
class TestConfigRowBuilders:
    """Tests for ConfigMapRowBuilder and SecretRowBuilder."""

    def test_data_count_includes_binary_data(self) -> None:
        assert data_count({"data": {"a": "1", "b": "2"}, "binaryData": {"c": "AA=="}}) == 3
        assert data_count({}) == 0

    def test_configmap_row(self) -> None:
        item = {"metadata": _meta("settings"), "data": {"a": "1"}}

        row = ConfigMapRowBuilder().build_row(item, BuildScope(now=NOW))

        assert row.values == ("settings", "1", "1h")

    def test_secret_row(self) -> None:
        item = {"metadata": _meta("tls"), "type": "kubernetes.io/tls", "data": {"tls.crt": "", "tls.key": ""}}

        row = SecretRowBuilder().build_row(item, BuildScope(now=NOW))

        assert row.values == ("tls", "kubernetes.io/tls", "2", "1h")
        assert [c.title for c in SecretRowBuilder().columns()] == ["NAME", "TYPE", "DATA", "AGE"]
