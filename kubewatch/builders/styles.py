"""Semantic cell styles for status values and metric thresholds."""

from __future__ import annotations

from kubewatch.constants.limits import (
    CPU_LOW_CORES,
    CPU_MEDIUM_CORES,
    MEMORY_LOW_MI,
    MEMORY_MEDIUM_MI,
    RESTARTS_WARNING,
)
from kubewatch.constants.values import (
    PLACEHOLDER_DASH,
    STYLE_ERROR,
    STYLE_INFO,
    STYLE_MUTED,
    STYLE_OK,
    STYLE_TERMINATING,
    STYLE_WARNING,
)
from kubewatch.utils.resource_parser import memory_str_to_mi, parse_cpu

_STATUS_STYLES: dict[str, str] = {
    "Running": STYLE_OK,
    "Pending": STYLE_WARNING,
    "ContainerCreating": STYLE_WARNING,
    "PodInitializing": STYLE_WARNING,
    "Failed": STYLE_ERROR,
    "Error": STYLE_ERROR,
    "CrashLoopBackOff": STYLE_ERROR,
    "ImagePullBackOff": STYLE_ERROR,
    "ErrImagePull": STYLE_ERROR,
    "OOMKilled": STYLE_ERROR,
    "Completed": STYLE_INFO,
    "Succeeded": STYLE_INFO,
    "Terminating": STYLE_TERMINATING,
}


def _is_placeholder(value: str) -> bool:
    return value in ("", PLACEHOLDER_DASH)


def status_style(status: str) -> str | None:
    """Color for a pod status; None leaves the row style in place."""
    return _STATUS_STYLES.get(status)


def restarts_style(value: str) -> str | None:
    """Dim for zero restarts, warning below the threshold, error above.

    Accepts the ``"5 (2m ago)"`` form; only the leading count is read.
    """
    head = value.split(" ", 1)[0]
    try:
        restarts = int(head)
    except ValueError:
        return None
    if restarts == 0:
        return STYLE_MUTED
    if restarts < RESTARTS_WARNING:
        return STYLE_WARNING
    return STYLE_ERROR


def cpu_style(value: str) -> str:
    """Threshold color for a CPU usage string such as ``"250m"``."""
    if _is_placeholder(value):
        return STYLE_MUTED
    cores = parse_cpu(value)
    if cores < CPU_LOW_CORES:
        return STYLE_OK
    if cores < CPU_MEDIUM_CORES:
        return STYLE_WARNING
    return STYLE_ERROR


def memory_style(value: str) -> str:
    """Threshold color for a memory usage string such as ``"300Mi"``."""
    if _is_placeholder(value):
        return STYLE_MUTED
    mebibytes = memory_str_to_mi(value)
    if mebibytes < MEMORY_LOW_MI:
        return STYLE_OK
    if mebibytes < MEMORY_MEDIUM_MI:
        return STYLE_WARNING
    return STYLE_ERROR


def placeholder_style(value: str) -> str | None:
    """Dim "-" placeholders."""
    return STYLE_MUTED if _is_placeholder(value) else None


__all__ = [
    "cpu_style",
    "memory_style",
    "placeholder_style",
    "restarts_style",
    "status_style",
]
