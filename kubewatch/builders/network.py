"""Row builders for services and ingresses."""

from __future__ import annotations

from typing import Any

from kubewatch.builders.base import BuildScope, Cell, RowBuilder, num_column
from kubewatch.constants.enums import ResourceType
from kubewatch.constants.values import PLACEHOLDER_NONE
from kubewatch.models.table.column import ColumnSpec
from kubewatch.utils.formatting import format_age


def _load_balancer_addresses(status: dict[str, Any]) -> list[str]:
    addresses = []
    for entry in (status.get("loadBalancer") or {}).get("ingress", []) or []:
        address = entry.get("ip") or entry.get("hostname")
        if address:
            addresses.append(address)
    return addresses


def format_service_port(port: dict[str, Any]) -> str:
    """``port[:nodePort][/protocol][(name)]``; TCP is implied."""
    text = str(port.get("port", ""))
    if port.get("nodePort"):
        text = f"{text}:{port['nodePort']}"
    protocol = port.get("protocol")
    if protocol and protocol != "TCP":
        text = f"{text}/{protocol}"
    if port.get("name"):
        text = f"{text}({port['name']})"
    return text


class ServiceRowBuilder(RowBuilder):
    """Services: type, cluster IP, external addresses and ports."""

    resource_type = ResourceType.SERVICE

    def resource_columns(self) -> list[ColumnSpec]:
        return [
            ColumnSpec.fixed("TYPE", 12),
            ColumnSpec.fixed("CLUSTER-IP", 15),
            ColumnSpec.flex("EXTERNAL-IP", max_width=30),
            ColumnSpec.flex("PORT(S)"),
            num_column("AGE", 5),
        ]

    def resource_cells(self, item: dict[str, Any], scope: BuildScope) -> list[Cell]:
        spec = item.get("spec", {})
        status = item.get("status", {})
        service_type = spec.get("type", "")

        external = spec.get("externalIPs") or []
        if not external and service_type == "LoadBalancer":
            external = _load_balancer_addresses(status)
        external_ip = ",".join(external) or PLACEHOLDER_NONE

        ports = [format_service_port(port) for port in spec.get("ports", []) or []]

        return [
            (service_type, None),
            (spec.get("clusterIP") or "None", None),
            (external_ip, None),
            (",".join(ports) or PLACEHOLDER_NONE, None),
            (format_age(item.get("metadata", {}).get("creationTimestamp"), scope.now), None),
        ]


class IngressRowBuilder(RowBuilder):
    """Ingresses: class, hosts, load balancer address and ports."""

    resource_type = ResourceType.INGRESS

    def resource_columns(self) -> list[ColumnSpec]:
        return [
            ColumnSpec.flex("CLASS", max_width=20),
            ColumnSpec.flex("HOSTS"),
            ColumnSpec.flex("ADDRESS", max_width=40),
            ColumnSpec.fixed("PORTS", 7),
            num_column("AGE", 5),
        ]

    def resource_cells(self, item: dict[str, Any], scope: BuildScope) -> list[Cell]:
        spec = item.get("spec", {})
        hosts = [rule["host"] for rule in spec.get("rules", []) or [] if rule.get("host")]
        addresses = _load_balancer_addresses(item.get("status", {}))
        ports = "80, 443" if spec.get("tls") else "80"

        return [
            (spec.get("ingressClassName") or PLACEHOLDER_NONE, None),
            (",".join(hosts) or PLACEHOLDER_NONE, None),
            (",".join(addresses) or PLACEHOLDER_NONE, None),
            (ports, None),
            (format_age(item.get("metadata", {}).get("creationTimestamp"), scope.now), None),
        ]


__all__ = ["IngressRowBuilder", "ServiceRowBuilder", "format_service_port"]
