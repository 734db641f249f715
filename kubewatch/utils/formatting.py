"""Display formatting helpers for resource ages and timestamps."""

from __future__ import annotations

from datetime import datetime, timezone

from kubewatch.constants.values import PLACEHOLDER_DASH

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp as emitted by the Kubernetes API."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_duration(seconds: float) -> str:
    """Format a duration like kubectl: ``45s``, ``12m``, ``3h``, ``4d``, ``2mo``, ``1y``."""
    seconds = max(0.0, seconds)
    if seconds > _YEAR:
        return f"{int(seconds // _YEAR)}y"
    if seconds > _MONTH:
        return f"{int(seconds // _MONTH)}mo"
    if seconds > _DAY:
        return f"{int(seconds // _DAY)}d"
    if seconds > _HOUR:
        return f"{int(seconds // _HOUR)}h"
    if seconds > _MINUTE:
        return f"{int(seconds // _MINUTE)}m"
    return f"{int(seconds)}s"


def format_age(timestamp: str | datetime | None, now: datetime | None = None) -> str:
    """Age of ``timestamp`` relative to ``now`` (UTC), or "-" when unknown."""
    created = parse_timestamp(timestamp) if isinstance(timestamp, str) else timestamp
    if created is None:
        return PLACEHOLDER_DASH
    now = now or datetime.now(timezone.utc)
    return format_duration((now - created).total_seconds())


__all__ = ["format_age", "format_duration", "parse_timestamp"]
