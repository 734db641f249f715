"""Tests for age and timestamp formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from kubewatch.utils.formatting import format_age, format_duration, parse_timestamp

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.mark.unit
@pytest.mark.fast
class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0s"),
            (45, "45s"),
            (60, "60s"),
            (61, "1m"),
            (59 * 60, "59m"),
            (3 * 3600 + 5, "3h"),
            (4 * 86400 + 5, "4d"),
            (65 * 86400, "2mo"),
            (400 * 86400, "1y"),
            (-10, "0s"),
        ],
    )
    def test_format_duration(self, seconds: float, expected: str) -> None:
        assert format_duration(seconds) == expected


@pytest.mark.unit
@pytest.mark.fast
class TestFormatAge:
    """Tests for format_age and parse_timestamp."""

    def test_age_from_rfc3339(self) -> None:
        created = (NOW - timedelta(minutes=5, seconds=3)).strftime("%Y-%m-%dT%H:%M:%SZ")

        assert format_age(created, now=NOW) == "5m"

    def test_age_from_datetime(self) -> None:
        assert format_age(NOW - timedelta(days=3, hours=2), now=NOW) == "3d"

    @pytest.mark.parametrize("value", [None, "", "not-a-date"])
    def test_unknown_timestamp(self, value: str | None) -> None:
        assert format_age(value, now=NOW) == "-"

    def test_parse_timestamp_is_utc(self) -> None:
        parsed = parse_timestamp("2024-06-01T10:00:00Z")

        assert parsed == datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc)

    def test_naive_timestamp_assumed_utc(self) -> None:
        parsed = parse_timestamp("2024-06-01T10:00:00")

        assert parsed is not None
        assert parsed.tzinfo is timezone.utc
