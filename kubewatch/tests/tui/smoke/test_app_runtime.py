"""Runtime smoke tests for KubeWatchApp.

The app runs headless through Textual's pilot with a fake kubectl runner,
so the full path is exercised: refresh worker, controller, row builders,
table engine, status line and key bindings.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from kubewatch.app import KubeWatchApp
from kubewatch.constants.enums import ResourceType
from kubewatch.controllers.errors import KubectlError
from kubewatch.controllers.resources.controller import ResourceController
from kubewatch.models.state.app_settings import AppSettings
from kubewatch.screens import ResourceScreen
from kubewatch.widgets import ResourceTable, StatusLine


def _items(kind: str, count: int) -> str:
    items = []
    for i in range(count):
        item: dict = {
            "metadata": {
                "name": f"{kind}-{i}",
                "namespace": "default" if i % 2 == 0 else "shop",
            }
        }
        if kind == "pod":
            item["status"] = {"phase": "Running"}
        items.append(item)
    return json.dumps({"items": items})


def _fake_kubectl(fail: bool = False) -> AsyncMock:
    async def run(args, context=None):
        if fail:
            raise KubectlError("Unable to connect to the server", context, 1)
        if args[0] == "top":
            return ""
        if args[1] == ResourceType.POD.value:
            return _items("pod", 30)
        if args[1] == ResourceType.DEPLOYMENT.value:
            return _items("deploy", 4)
        return json.dumps({"items": []})

    return AsyncMock(side_effect=run)


def _make_app(run: AsyncMock, **settings) -> KubeWatchApp:
    app_settings = AppSettings(refresh_interval=60, **settings)
    controller = ResourceController(app_settings, run_kubectl_func=run)
    return KubeWatchApp(app_settings, controller)


async def _wait_for(pilot, predicate: Callable[[], bool], timeout: float = 3.0) -> None:
    """Pause until ``predicate`` holds or ``timeout`` elapses."""
    deadline = asyncio.get_running_loop().time() + timeout
    while not predicate():
        if asyncio.get_running_loop().time() > deadline:
            break
        await pilot.pause(0.05)


def _table(app: KubeWatchApp) -> ResourceTable:
    return app.screen.query_one("#resource-table", ResourceTable)


def _status(app: KubeWatchApp) -> StatusLine:
    return app.screen.query_one("#status-line", StatusLine)


class TestKubeWatchAppRuntime:
    """End-to-end behavior of the running app."""

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_initial_refresh_fills_table(self) -> None:
        app = _make_app(_fake_kubectl())

        async with app.run_test(size=(100, 20)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, ResourceScreen))
            await _wait_for(pilot, lambda: _table(app).row_count == 30)

            table = _table(app)
            assert table.row_count == 30
            assert [c.title for c in table.engine.columns][:2] == ["NAME", "READY"]
            assert "pod-0" in table.render_line(1).text

            await _wait_for(pilot, lambda: _status(app).row_count == 30)
            status = _status(app)
            assert status.resource == "pods"
            assert status.row_count == 30
            assert status.age_label.startswith("last refreshed")

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_navigation_keys_move_selection(self) -> None:
        app = _make_app(_fake_kubectl())

        async with app.run_test(size=(100, 20)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, ResourceScreen))
            await _wait_for(pilot, lambda: _table(app).row_count == 30)
            _table(app).focus()

            await pilot.press("down", "down", "end")
            await pilot.pause()

            table = _table(app)
            assert table.engine.selected_index == 29
            assert table.engine.viewport.is_item_visible(29)
            await _wait_for(pilot, lambda: _status(app).selected == 29)
            assert _status(app).selected == 29

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_refresh_keeps_selected_row(self) -> None:
        run = _fake_kubectl()
        app = _make_app(run)

        async with app.run_test(size=(100, 20)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, ResourceScreen))
            await _wait_for(pilot, lambda: _table(app).row_count == 30)
            _table(app).focus()
            await pilot.press("down", "down", "down")
            await pilot.pause()
            calls_before = run.await_count

            await pilot.press("r")
            await _wait_for(pilot, lambda: run.await_count > calls_before)
            await pilot.pause()

            table = _table(app)
            assert table.engine.selected_row is not None
            assert table.engine.selected_row.values[0] == "pod-3"

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_t_cycles_resource_type(self) -> None:
        app = _make_app(_fake_kubectl())

        async with app.run_test(size=(100, 20)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, ResourceScreen))
            await _wait_for(pilot, lambda: _table(app).row_count == 30)

            await pilot.press("t")
            await _wait_for(pilot, lambda: _table(app).row_count == 4)

            assert app.controller.resource_type is ResourceType.DEPLOYMENT
            assert [c.title for c in _table(app).engine.columns][1] == "READY"
            assert "UP-TO-DATE" in [c.title for c in _table(app).engine.columns]
            assert _status(app).resource == "deployments"

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_a_toggles_all_namespaces(self) -> None:
        run = _fake_kubectl()
        app = _make_app(run)

        async with app.run_test(size=(100, 20)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, ResourceScreen))
            await _wait_for(pilot, lambda: _table(app).row_count == 30)

            await pilot.press("a")
            await _wait_for(
                pilot, lambda: "NAMESPACE" in [c.title for c in _table(app).engine.columns]
            )
            await _wait_for(pilot, lambda: _table(app).row_count == 30)

            assert app.controller.all_namespaces is True
            assert _status(app).namespace == "all"
            get_calls = [c.args[0] for c in run.await_args_list if c.args[0][0] == "get"]
            assert "--all-namespaces" in get_calls[-1]

            await pilot.press("a")
            await _wait_for(pilot, lambda: not app.controller.all_namespaces)
            assert app.controller.namespace == "default"

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_shift_t_cycles_theme(self) -> None:
        app = _make_app(_fake_kubectl())

        async with app.run_test(size=(100, 20)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, ResourceScreen))

            await pilot.press("T")
            await pilot.pause()

            assert _table(app).engine.theme.name == "dark"

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_unreachable_cluster_shows_error(self) -> None:
        app = _make_app(_fake_kubectl(fail=True))

        async with app.run_test(size=(100, 20)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, ResourceScreen))
            await _wait_for(pilot, lambda: _status(app).error is not None)

            assert "Unable to connect" in (_status(app).error or "")
            assert _table(app).row_count == 0
            assert "No resources found" in _table(app).render_line(1).text
            assert _status(app).age_label == "Never"
