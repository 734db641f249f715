"""Resource fetcher - lists Kubernetes resources and pod metrics via kubectl."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubewatch.builders.base import PodMetrics
from kubewatch.constants.enums import ResourceType
from kubewatch.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubewatch.controllers.errors import FetchError

logger = logging.getLogger(__name__)


def scope_args(namespace: str, all_namespaces: bool) -> tuple[str, ...]:
    """kubectl namespace selection flags."""
    if all_namespaces:
        return ("--all-namespaces",)
    return ("-n", namespace)


class ResourceFetcher:
    """Fetches resource lists and pod usage metrics for one cluster context."""

    def __init__(self, run_kubectl_func: Any, context: str | None = None) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function taking kubectl args, returning stdout
            context: Context name used in error messages
        """
        self._run_kubectl = run_kubectl_func
        self.context = context

    async def fetch_items(
        self,
        resource_type: ResourceType,
        namespace: str,
        all_namespaces: bool = False,
    ) -> list[dict[str, Any]]:
        """Fetch raw items for ``resource_type``.

        Raises:
            FetchError: If kubectl fails or returns unparseable output.
        """
        args = (
            "get",
            resource_type.value,
            "-o",
            "json",
            f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
            *scope_args(namespace, all_namespaces),
        )
        output = await self._run_kubectl(args)
        try:
            payload = json.loads(output) if output else {}
        except json.JSONDecodeError as exc:
            logger.exception("Failed to parse %s list", resource_type.value)
            raise FetchError(f"invalid JSON from kubectl get {resource_type.value}", self.context) from exc
        items = payload.get("items", []) if isinstance(payload, dict) else []
        return [item for item in items if isinstance(item, dict)]

    async def fetch_pod_metrics(self, namespace: str, all_namespaces: bool = False) -> PodMetrics:
        """Fetch pod CPU/memory usage from ``kubectl top``.

        Metrics are optional: when the metrics API is unavailable an empty
        mapping is returned and the table shows "-".
        """
        args = ("top", "pods", "--no-headers", *scope_args(namespace, all_namespaces))
        try:
            output = await self._run_kubectl(args)
        except FetchError as exc:
            logger.debug("Pod metrics unavailable: %s", exc)
            return {}
        return self.parse_top_output(output, namespace, all_namespaces)

    @staticmethod
    def parse_top_output(output: str, namespace: str, all_namespaces: bool) -> PodMetrics:
        """Parse ``kubectl top pods --no-headers`` lines.

        Lines are ``NAME CPU MEMORY`` or, across all namespaces,
        ``NAMESPACE NAME CPU MEMORY``.
        """
        metrics: dict[tuple[str, str], tuple[str, str]] = {}
        for line in (output or "").splitlines():
            fields = line.split()
            if all_namespaces and len(fields) >= 4:
                pod_namespace, name, cpu, memory = fields[:4]
            elif not all_namespaces and len(fields) >= 3:
                pod_namespace = namespace
                name, cpu, memory = fields[:3]
            else:
                continue
            metrics[(pod_namespace, name)] = (cpu, memory)
        return metrics


__all__ = ["ResourceFetcher", "scope_args"]
