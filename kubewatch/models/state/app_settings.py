"""Application settings models."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from kubewatch.constants.defaults import (
    BUFFER_SIZE_DEFAULT,
    CONTEXT_ROWS_DEFAULT,
    HORIZONTAL_SCROLL_STEP_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    RESOURCE_TYPE_DEFAULT,
    SHOW_HEADER_DEFAULT,
    THEME_DEFAULT,
)
from kubewatch.constants.enums import ResourceType, ThemeMode
from kubewatch.constants.limits import (
    BUFFER_SIZE_MAX,
    BUFFER_SIZE_MIN,
    CACHE_SIZE_MIN,
    MAX_ROWS_DISPLAY,
    REFRESH_INTERVAL_MIN,
    RENDER_CACHE_SIZE,
)
from kubewatch.constants.timeouts import SCROLL_END_QUIESCENCE


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Cluster scope
    contexts: list[str] = []  # empty -> current kubectl context
    namespace: str = NAMESPACE_DEFAULT  # "all" or "" -> every namespace
    resource_type: str = RESOURCE_TYPE_DEFAULT

    # UI preferences
    theme: str = THEME_DEFAULT
    refresh_interval: int = Field(default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN)
    show_header: bool = SHOW_HEADER_DEFAULT
    horizontal_scroll_step: int = Field(default=HORIZONTAL_SCROLL_STEP_DEFAULT, ge=1)

    # Table engine tuning
    buffer_size: int = Field(default=BUFFER_SIZE_DEFAULT, ge=BUFFER_SIZE_MIN, le=BUFFER_SIZE_MAX)
    cache_size: int = Field(default=RENDER_CACHE_SIZE, ge=CACHE_SIZE_MIN)
    scroll_end_delay: float = Field(default=SCROLL_END_QUIESCENCE, gt=0)
    context_rows: int = Field(default=CONTEXT_ROWS_DEFAULT, ge=0)
    max_rows: int = Field(default=MAX_ROWS_DISPLAY, ge=1)

    @field_validator("resource_type")
    @classmethod
    def _validate_resource_type(cls, value: str) -> str:
        try:
            return ResourceType(value).value
        except ValueError as exc:
            valid = ", ".join(rt.value for rt in ResourceType)
            raise ValueError(f"unknown resource type {value!r} (expected one of: {valid})") from exc

    @field_validator("theme")
    @classmethod
    def _validate_theme(cls, value: str) -> str:
        try:
            return ThemeMode(value).value
        except ValueError:
            return THEME_DEFAULT

    @property
    def all_namespaces(self) -> bool:
        return self.namespace in ("", "all")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


def load_settings(data: Mapping[str, Any] | None = None) -> AppSettings:
    """Build validated settings from an already-parsed mapping.

    Raises:
        ConfigLoadError: If any value fails validation.
    """
    try:
        return AppSettings.model_validate(dict(data or {}))
    except ValidationError as exc:
        raise ConfigLoadError(str(exc)) from exc
