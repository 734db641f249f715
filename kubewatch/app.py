"""Main application class for KubeWatch TUI."""

from __future__ import annotations

import argparse
import inspect
import logging
from collections.abc import Sequence
from typing import Any

from textual.app import App

from kubewatch.constants.enums import ResourceType, ThemeMode
from kubewatch.constants.values import ALL_NAMESPACES, APP_TITLE
from kubewatch.controllers.resources.controller import ResourceController
from kubewatch.keyboard.app import APP_BINDINGS
from kubewatch.models.state.app_settings import AppSettings, ConfigLoadError, load_settings
from kubewatch.screens import ResourceScreen

logger = logging.getLogger(__name__)


class KubeWatchApp(App[None]):
    """Real-time Kubernetes resource tables in the terminal."""

    TITLE = APP_TITLE
    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: ResourceController | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings = settings or AppSettings()
        self.controller = controller or ResourceController(self.settings)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(ResourceScreen(self.controller, self.settings))

    async def _forward_to_screen(self, action: str) -> None:
        """Run ``action_<action>`` on the current screen if it has one."""
        method = getattr(self.screen, f"action_{action}", None)
        if method is None:
            logger.debug("Screen %s has no %s action", type(self.screen).__name__, action)
            return
        if inspect.iscoroutinefunction(method):
            await method()
        else:
            method()

    async def action_refresh(self) -> None:
        """Refresh data."""
        await self._forward_to_screen("refresh")

    async def action_cycle_resource(self) -> None:
        await self._forward_to_screen("cycle_resource")

    async def action_toggle_all_namespaces(self) -> None:
        await self._forward_to_screen("toggle_all_namespaces")

    async def action_cycle_theme(self) -> None:
        await self._forward_to_screen("cycle_theme")


# ============================================================================
# Command line
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubewatch",
        description="Watch Kubernetes resources in a live terminal table",
    )
    parser.add_argument(
        "--context",
        dest="contexts",
        action="append",
        help="kubectl context to watch (repeat for several clusters)",
    )
    parser.add_argument("-n", "--namespace", help="Namespace to list")
    parser.add_argument(
        "-A",
        "--all-namespaces",
        action="store_true",
        help="List resources across all namespaces",
    )
    parser.add_argument(
        "-r",
        "--resource-type",
        choices=[rt.value for rt in ResourceType],
        help="Resource type shown at startup",
    )
    parser.add_argument("--theme", choices=[mode.value for mode in ThemeMode])
    parser.add_argument("--refresh-interval", type=int, help="Seconds between refreshes")
    parser.add_argument("--log-file", help="Write debug logs to this file")
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    """Validated settings from parsed arguments; unset flags keep defaults.

    Raises:
        ConfigLoadError: If a value is out of range.
    """
    data: dict[str, Any] = {
        "contexts": args.contexts,
        "namespace": ALL_NAMESPACES if args.all_namespaces else args.namespace,
        "resource_type": args.resource_type,
        "theme": args.theme,
        "refresh_interval": args.refresh_interval,
    }
    return load_settings({key: value for key, value in data.items() if value is not None})


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    try:
        settings = settings_from_args(args)
    except ConfigLoadError as exc:
        parser.error(str(exc))
    KubeWatchApp(settings).run()


if __name__ == "__main__":
    main()
