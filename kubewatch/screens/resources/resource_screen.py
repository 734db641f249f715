"""ResourceScreen - live, periodically refreshed resource table.

A refresh worker runs every ``refresh_interval`` seconds. Each outcome is
posted to the table as ``ResourceTable.RefreshReceived``; the table applies
it unless a newer refresh already landed, and the message then bubbles up
here so the status line can follow.
"""

from __future__ import annotations

import logging
import time

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Footer, Header

from kubewatch.constants.defaults import NAMESPACE_DEFAULT
from kubewatch.constants.enums import ResourceType, ThemeMode
from kubewatch.constants.values import ALL_NAMESPACES
from kubewatch.controllers.resources.controller import ResourceController
from kubewatch.engine.refresh import RefreshFailed
from kubewatch.models.state.app_settings import AppSettings
from kubewatch.screens.mixins.worker_mixin import WorkerMixin
from kubewatch.widgets import ResourceTable, StatusLine

logger = logging.getLogger(__name__)


def _next_member(members: list, current) -> object:
    return members[(members.index(current) + 1) % len(members)]


class ResourceScreen(WorkerMixin, Screen):
    """One resource type from one or more contexts, refreshed on a timer."""

    DEFAULT_CSS = """
    ResourceScreen {
        layout: vertical;
    }
    """

    def __init__(self, controller: ResourceController, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.controller = controller
        self.settings = settings or AppSettings()
        self._theme = ThemeMode(self.settings.theme)
        # Namespace restored when leaving the all-namespaces view.
        self._home_namespace = (
            NAMESPACE_DEFAULT if controller.all_namespaces else controller.namespace
        )
        self._refresh_timer: Timer | None = None
        self._refresh_token: object | None = None

    def compose(self) -> ComposeResult:
        table = ResourceTable(
            settings=self.settings,
            columns=self.controller.columns(),
            id="resource-table",
        )
        yield Header()
        yield StatusLine(table.engine.refresh_age_label, id="status-line")
        yield table
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.controller.resource_type.value
        self.table.focus()
        self._sync_status()
        self._refresh_timer = self.set_interval(
            self.settings.refresh_interval,
            self._on_refresh_tick,
            name="resource-refresh",
        )
        self.start_refresh()

    def on_unmount(self) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
            self._refresh_timer = None

    @property
    def table(self) -> ResourceTable:
        return self.query_one("#resource-table", ResourceTable)

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def start_refresh(self) -> None:
        """Start a refresh, cancelling any refresh still in flight."""
        self.start_worker(self._refresh_worker, name="resource-refresh")

    def _on_refresh_tick(self) -> None:
        if self.is_loading:
            logger.debug("Previous refresh still running, skipping tick")
            return
        self.start_refresh()

    async def _refresh_worker(self) -> None:
        scope = (self.controller.resource_type, self.controller.namespace)
        token = object()
        self._refresh_token = token
        self.is_loading = True
        started = time.monotonic()
        try:
            event = await self.controller.refresh()
        finally:
            # A cancelled refresh must not clear the flag of its replacement.
            if self._refresh_token is token:
                self.is_loading = False
        if (self.controller.resource_type, self.controller.namespace) != scope:
            logger.debug("Dropping refresh #%d fetched for a previous scope", event.sequence)
            return
        duration_ms = (time.monotonic() - started) * 1000
        table = self._table_or_none()
        if table is not None:
            table.post_message(ResourceTable.RefreshReceived(event, duration_ms))

    def _table_or_none(self) -> ResourceTable | None:
        try:
            return self.table
        except NoMatches:
            return None

    def on_resource_table_refresh_received(self, message: ResourceTable.RefreshReceived) -> None:
        if not message.applied:
            return
        event = message.event
        if isinstance(event, RefreshFailed):
            logger.warning("Refresh #%d failed: %s", event.sequence, event.error)
            self.error = event.error
        else:
            self.error = "; ".join(event.partial_errors) or None
        self._sync_status()

    def on_resource_table_selection_changed(self, _: ResourceTable.SelectionChanged) -> None:
        self._sync_status()

    def _sync_status(self) -> None:
        status = self._status_line()
        table = self._table_or_none()
        if status is None or table is None:
            return
        engine = table.engine
        status.resource = self.controller.resource_type.value
        status.namespace = ALL_NAMESPACES if self.controller.all_namespaces else self.controller.namespace
        status.contexts = ", ".join(context for context in self.controller.contexts if context)
        status.row_count = len(engine.rows)
        status.selected = engine.selected_index
        status.wrap = engine.wrap
        status.tick()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_refresh(self) -> None:
        self.start_refresh()

    def action_cycle_resource(self) -> None:
        resource_type = _next_member(list(ResourceType), self.controller.resource_type)
        self.controller.set_resource_type(resource_type)
        self.sub_title = self.controller.resource_type.value
        self._change_scope()

    def action_toggle_all_namespaces(self) -> None:
        if self.controller.all_namespaces:
            self.controller.set_namespace(self._home_namespace)
        else:
            self._home_namespace = self.controller.namespace
            self.controller.set_namespace(ALL_NAMESPACES)
        self._change_scope()

    def action_cycle_theme(self) -> None:
        self._theme = _next_member(list(ThemeMode), self._theme)
        logger.debug("Table theme: %s", self._theme.value)
        self.table.set_theme(self._theme.value)

    def _change_scope(self) -> None:
        self.cancel_workers()
        self.error = None
        self.table.clear(self.controller.columns())
        self._sync_status()
        self.start_refresh()


__all__ = ["ResourceScreen"]
