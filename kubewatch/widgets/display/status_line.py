"""StatusLine widget for the TUI application.

One line above the table: resource type, scope, row count, cursor
position, wrap state and refresh age. The age is re-read from its source
every ``STATUS_TICK_INTERVAL`` seconds so "last refreshed Ns ago" keeps
counting between refreshes.

CSS Classes: widget-status-line
"""

from __future__ import annotations

from collections.abc import Callable

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from kubewatch.constants.timeouts import STATUS_TICK_INTERVAL
from kubewatch.constants.values import (
    REFRESH_NEVER,
    STYLE_ERROR,
    STYLE_MUTED,
    STYLE_WARNING,
)

_SEPARATOR = " | "


def format_status(
    *,
    resource: str,
    namespace: str,
    contexts: str = "",
    row_count: int = 0,
    selected: int = 0,
    wrap: bool = False,
    age_label: str = REFRESH_NEVER,
    loading: bool = False,
    error: str | None = None,
) -> Text:
    """Build the status line text."""
    text = Text(no_wrap=True, overflow="ellipsis", end="")
    text.append(f" {resource}", style="bold")
    text.append(_SEPARATOR, style=STYLE_MUTED)
    text.append(f"ns: {namespace}")
    if contexts:
        text.append(_SEPARATOR, style=STYLE_MUTED)
        text.append(f"ctx: {contexts}")
    text.append(_SEPARATOR, style=STYLE_MUTED)
    text.append(f"{row_count} rows")
    if row_count:
        text.append(f" ({selected + 1}/{row_count})", style=STYLE_MUTED)
    if wrap:
        text.append(_SEPARATOR, style=STYLE_MUTED)
        text.append("wrap")
    text.append(_SEPARATOR, style=STYLE_MUTED)
    text.append(age_label, style=STYLE_MUTED)
    if loading:
        text.append(_SEPARATOR, style=STYLE_MUTED)
        text.append("refreshing…", style=STYLE_WARNING)
    if error:
        text.append(_SEPARATOR, style=STYLE_MUTED)
        text.append(error, style=STYLE_ERROR)
    return text


class StatusLine(Widget):
    """Single-line status bar for the resource table.

    CSS Classes: widget-status-line
    """

    DEFAULT_CSS = """
    StatusLine {
        height: 1;
        width: 1fr;
        background: $panel;
    }
    """

    resource = reactive("")
    namespace = reactive("")
    contexts = reactive("")
    row_count = reactive(0)
    selected = reactive(0)
    wrap = reactive(False)
    age_label = reactive(REFRESH_NEVER)
    loading = reactive(False)
    error = reactive[str | None](None)

    def __init__(
        self,
        age_source: Callable[[], str] | None = None,
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(id=id, classes=f"widget-status-line {classes}".strip())
        self._age_source = age_source

    def on_mount(self) -> None:
        self.tick()
        self.set_interval(STATUS_TICK_INTERVAL, self.tick, name="status-tick")

    def tick(self) -> None:
        """Re-read the refresh age label."""
        if self._age_source is not None:
            self.age_label = self._age_source()

    def render(self) -> Text:
        return format_status(
            resource=self.resource,
            namespace=self.namespace,
            contexts=self.contexts,
            row_count=self.row_count,
            selected=self.selected,
            wrap=self.wrap,
            age_label=self.age_label,
            loading=self.loading,
            error=self.error,
        )


__all__ = ["StatusLine", "format_status"]
