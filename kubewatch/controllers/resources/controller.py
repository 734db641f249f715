"""Resource controller - fans in resource lists from one or more contexts.

Each refresh is stamped with a sequence number before any fetch starts and
returns either ``RefreshComplete`` or ``RefreshFailed``. When several
contexts are watched, a failing context keeps contributing its last good
rows so one unreachable cluster never blanks the whole table.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from functools import partial
from typing import Any

from kubewatch.builders import BuildScope, RowBuilder, get_builder
from kubewatch.constants.enums import ResourceType
from kubewatch.controllers.base.base_controller import BaseController
from kubewatch.controllers.errors import FetchError
from kubewatch.controllers.resources.fetcher import ResourceFetcher
from kubewatch.engine.refresh import (
    RefreshComplete,
    RefreshEvent,
    RefreshFailed,
    RefreshSequencer,
)
from kubewatch.models.state.app_settings import AppSettings
from kubewatch.models.table.column import ColumnSpec
from kubewatch.models.table.row import Row, RowSet

logger = logging.getLogger(__name__)


class ResourceController(BaseController):
    """Lists one resource type across the configured contexts."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        run_kubectl_func: Any = None,
        sequencer: RefreshSequencer | None = None,
    ) -> None:
        settings = settings or AppSettings()
        contexts = list(dict.fromkeys(settings.contexts))
        super().__init__(contexts[0] if len(contexts) == 1 else None)

        # None stands for the current kubectl context.
        self._contexts: list[str | None] = list(contexts) or [None]
        self._multi_context = len(self._contexts) > 1
        self._namespace = settings.namespace
        self._resource_type = ResourceType(settings.resource_type)
        self._run_kubectl_func = run_kubectl_func or self._run_kubectl
        self._sequencer = sequencer or RefreshSequencer()
        self._fetchers = {
            context: ResourceFetcher(partial(self._run_kubectl_func, context=context), context)
            for context in self._contexts
        }
        self._last_good: dict[str | None, list[Row]] = {}

    # ------------------------------------------------------------------
    # Scope
    # ------------------------------------------------------------------

    @property
    def contexts(self) -> list[str | None]:
        return list(self._contexts)

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def resource_type(self) -> ResourceType:
        return self._resource_type

    @property
    def all_namespaces(self) -> bool:
        return self._namespace in ("", "all")

    @property
    def builder(self) -> RowBuilder:
        return get_builder(self._resource_type)

    def set_resource_type(self, resource_type: ResourceType | str) -> None:
        resource_type = ResourceType(resource_type)
        if resource_type is not self._resource_type:
            self._resource_type = resource_type
            self._last_good.clear()

    def set_namespace(self, namespace: str) -> None:
        if namespace != self._namespace:
            self._namespace = namespace
            self._last_good.clear()

    def columns(self) -> list[ColumnSpec]:
        """Column specs for the current resource type and scope."""
        return self.builder.columns(
            show_namespace=self.all_namespaces,
            show_context=self._multi_context,
        )

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def _fetch_context(
        self,
        context: str | None,
        resource_type: ResourceType,
        now: datetime,
    ) -> list[Row]:
        fetcher = self._fetchers[context]
        items_task = fetcher.fetch_items(resource_type, self._namespace, self.all_namespaces)
        if resource_type is ResourceType.POD:
            items, metrics = await asyncio.gather(
                items_task,
                fetcher.fetch_pod_metrics(self._namespace, self.all_namespaces),
            )
        else:
            items, metrics = await items_task, None
        scope = BuildScope(
            show_namespace=self.all_namespaces,
            context=(context or "") if self._multi_context else None,
            now=now,
            metrics=metrics,
        )
        return get_builder(resource_type).build_rows(items, scope)

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch rows from every context.

        Returns:
            Dictionary with ``rows`` (list of Row), ``columns`` and
            ``errors`` (context label -> message) for contexts that failed.
        """
        resource_type = self._resource_type
        now = datetime.now(timezone.utc)
        results = await asyncio.gather(
            *(self._fetch_context(context, resource_type, now) for context in self._contexts),
            return_exceptions=True,
        )

        rows: list[Row] = []
        errors: dict[str, str] = {}
        succeeded = 0
        for context, result in zip(self._contexts, results):
            label = context or "current"
            if isinstance(result, FetchError):
                logger.warning("Fetching %s from %s failed: %s", resource_type.value, label, result)
                errors[label] = str(result.args[0]) if result.args else type(result).__name__
                rows.extend(self._last_good.get(context, []))
                continue
            if isinstance(result, BaseException):
                raise result
            succeeded += 1
            self._last_good[context] = result
            rows.extend(result)

        return {
            "rows": rows,
            "columns": self.columns(),
            "errors": errors,
            "succeeded": succeeded,
        }

    async def refresh(self) -> RefreshEvent:
        """Run one sequenced refresh and wrap the outcome in a refresh event."""
        sequence = self._sequencer.next()
        data = await self.fetch_all()

        if data["succeeded"] == 0:
            message = "; ".join(f"{label}: {error}" for label, error in data["errors"].items())
            return RefreshFailed(sequence=sequence, error=message or "no context responded")

        return RefreshComplete(
            sequence=sequence,
            rows=RowSet.of(data["rows"]),
            columns=tuple(data["columns"]),
            partial_errors=tuple(
                f"{label}: {error}" for label, error in data["errors"].items()
            ),
        )


__all__ = ["ResourceController"]
