"""Unit tests for the constants package.

Tests cover:
- Table engine limits and defaults
- Timeout types and relationships
- Enum values used on the kubectl command line
"""

from __future__ import annotations

import pytest

from kubewatch.constants.defaults import (
    BUFFER_SIZE_DEFAULT,
    CONTEXT_ROWS_DEFAULT,
    HORIZONTAL_SCROLL_STEP_DEFAULT,
    THEME_DEFAULT,
)
from kubewatch.constants.enums import ResourceType, ThemeMode, TruncatePolicy
from kubewatch.constants.limits import (
    BUFFER_SIZE_MAX,
    BUFFER_SIZE_MIN,
    MAX_ROWS_DISPLAY,
    RENDER_CACHE_SIZE,
)
from kubewatch.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    SCROLL_END_QUIESCENCE,
    STATUS_TICK_INTERVAL,
)
from kubewatch.constants.values import COLUMN_SEPARATOR, ELLIPSIS

# =============================================================================
# Limits and defaults
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestTableLimits:
    """Test table engine limits."""

    def test_max_rows(self) -> None:
        assert MAX_ROWS_DISPLAY == 1000

    def test_render_cache_size(self) -> None:
        assert RENDER_CACHE_SIZE == 1000

    def test_buffer_default_within_bounds(self) -> None:
        assert BUFFER_SIZE_MIN <= BUFFER_SIZE_DEFAULT <= BUFFER_SIZE_MAX

    def test_context_rows_default(self) -> None:
        assert CONTEXT_ROWS_DEFAULT == 3

    def test_horizontal_step_default(self) -> None:
        assert HORIZONTAL_SCROLL_STEP_DEFAULT == 5

    def test_theme_default_is_a_theme(self) -> None:
        assert ThemeMode(THEME_DEFAULT) is ThemeMode.DEFAULT


# =============================================================================
# Timeouts
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestTimeouts:
    """Test timeout constants."""

    def test_request_timeout_format(self) -> None:
        assert CLUSTER_REQUEST_TIMEOUT == "30s"

    def test_command_timeout_exceeds_request_timeout(self) -> None:
        assert KUBECTL_COMMAND_TIMEOUT > int(CLUSTER_REQUEST_TIMEOUT.rstrip("s"))

    def test_scroll_end_quiescence(self) -> None:
        assert SCROLL_END_QUIESCENCE == pytest.approx(0.1)

    def test_status_tick_is_one_second(self) -> None:
        assert STATUS_TICK_INTERVAL == pytest.approx(1.0)


# =============================================================================
# Enums and values
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestEnumsAndValues:
    """Test enums and rendering values."""

    def test_resource_types_are_kubectl_plurals(self) -> None:
        assert [rt.value for rt in ResourceType] == [
            "pods",
            "deployments",
            "statefulsets",
            "services",
            "ingresses",
            "configmaps",
            "secrets",
        ]

    def test_truncate_policies(self) -> None:
        assert {p.value for p in TruncatePolicy} == {"end", "middle", "start"}

    def test_ellipsis_is_single_cell(self) -> None:
        assert ELLIPSIS == "…"

    def test_column_separator(self) -> None:
        assert COLUMN_SEPARATOR == " "
