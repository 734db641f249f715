"""Unit tests for ResourceScreen refresh scheduling."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kubewatch.constants.enums import ResourceType, ThemeMode
from kubewatch.controllers.resources.controller import ResourceController
from kubewatch.engine.refresh import RefreshComplete, RefreshFailed
from kubewatch.models.state.app_settings import AppSettings
from kubewatch.models.table.row import RowSet
from kubewatch.screens.resources.resource_screen import ResourceScreen, _next_member
from kubewatch.widgets import ResourceTable


def _screen() -> ResourceScreen:
    controller = ResourceController(AppSettings(), run_kubectl_func=AsyncMock())
    return ResourceScreen(controller, AppSettings())


@pytest.mark.unit
@pytest.mark.fast
class TestNextMember:
    """Tests for the cycling helper."""

    def test_wraps_around(self) -> None:
        assert _next_member(list(ThemeMode), ThemeMode.LIGHT) is ThemeMode.DEFAULT
        assert _next_member(list(ResourceType), ResourceType.POD) is ResourceType.DEPLOYMENT


@pytest.mark.unit
class TestRefreshScheduling:
    """Tests for the periodic refresh tick and the refresh worker."""

    def test_tick_skipped_while_refresh_running(self) -> None:
        screen = _screen()
        screen.is_loading = True

        with patch.object(screen, "start_refresh") as start_refresh:
            screen._on_refresh_tick()

        start_refresh.assert_not_called()

    def test_tick_starts_refresh_when_idle(self) -> None:
        screen = _screen()

        with patch.object(screen, "start_refresh") as start_refresh:
            screen._on_refresh_tick()

        start_refresh.assert_called_once()

    @pytest.mark.asyncio
    async def test_worker_posts_event_to_table(self) -> None:
        screen = _screen()
        event = RefreshComplete(sequence=1, rows=RowSet())
        screen.controller.refresh = AsyncMock(return_value=event)
        table = MagicMock()

        with patch.object(screen, "_table_or_none", return_value=table):
            await screen._refresh_worker()

        message = table.post_message.call_args.args[0]
        assert isinstance(message, ResourceTable.RefreshReceived)
        assert message.event is event
        assert screen.is_loading is False

    @pytest.mark.asyncio
    async def test_worker_drops_event_from_previous_scope(self) -> None:
        screen = _screen()

        async def refresh_then_switch() -> RefreshFailed:
            screen.controller.set_resource_type(ResourceType.SERVICE)
            return RefreshFailed(sequence=1, error="late")

        screen.controller.refresh = AsyncMock(side_effect=refresh_then_switch)
        table = MagicMock()

        with patch.object(screen, "_table_or_none", return_value=table):
            await screen._refresh_worker()

        table.post_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_superseded_refresh_leaves_loading_flag_alone(self) -> None:
        screen = _screen()
        started = asyncio.Event()
        release = asyncio.Event()

        async def slow_refresh() -> RefreshFailed:
            started.set()
            await release.wait()
            return RefreshFailed(sequence=1, error="slow")

        screen.controller.refresh = AsyncMock(side_effect=slow_refresh)

        with patch.object(screen, "_table_or_none", return_value=MagicMock()):
            first = asyncio.create_task(screen._refresh_worker())
            await started.wait()
            # A replacement refresh takes over before the first one is cancelled.
            screen._refresh_token = object()
            first.cancel()
            with pytest.raises(asyncio.CancelledError):
                await first

        assert screen.is_loading is True
