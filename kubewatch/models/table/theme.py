"""Table themes (rich style strings for each table element)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from kubewatch.constants.enums import ThemeMode


class TableTheme(BaseModel):
    """Styling for the header, plain rows, alternate rows and the selection."""

    model_config = ConfigDict(frozen=True)

    name: str
    header_style: str = "bold"
    row_style: str = ""
    alternate_style: str = ""
    selected_style: str = "on grey35"


DEFAULT_THEME = TableTheme(
    name=ThemeMode.DEFAULT.value,
    header_style="bold color(15)",
    row_style="color(252)",
    alternate_style="color(252) on color(235)",
    selected_style="color(15) on color(33)",
)

DARK_THEME = TableTheme(
    name=ThemeMode.DARK.value,
    header_style="bold color(15)",
    row_style="color(250)",
    alternate_style="color(250) on color(234)",
    selected_style="color(229) on color(57)",
)

LIGHT_THEME = TableTheme(
    name=ThemeMode.LIGHT.value,
    header_style="bold color(0)",
    row_style="color(0)",
    alternate_style="color(0) on color(255)",
    selected_style="color(15) on color(33)",
)

_THEMES: dict[str, TableTheme] = {
    theme.name: theme for theme in (DEFAULT_THEME, DARK_THEME, LIGHT_THEME)
}


def get_theme(name: str | ThemeMode) -> TableTheme:
    """Look up a theme by name, falling back to the default theme."""
    key = name.value if isinstance(name, ThemeMode) else str(name)
    return _THEMES.get(key, DEFAULT_THEME)


__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "LIGHT_THEME",
    "TableTheme",
    "get_theme",
]
