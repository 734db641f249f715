"""Utility helpers."""

from kubewatch.utils.formatting import format_age, format_duration, parse_timestamp
from kubewatch.utils.resource_parser import (
    memory_str_to_bytes,
    memory_str_to_mi,
    parse_cpu,
)

__all__ = [
    "format_age",
    "format_duration",
    "memory_str_to_bytes",
    "memory_str_to_mi",
    "parse_cpu",
    "parse_timestamp",
]
