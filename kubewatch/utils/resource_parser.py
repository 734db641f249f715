"""Resource parsing utilities for CPU and memory values.

Provides functions to parse Kubernetes resource strings into standardized formats:
- CPU: parsed to cores (float)
- Memory: parsed to bytes or Mi (mebibytes)

and to format metric totals back into the short strings shown in the table.
"""

# Suffix multipliers for memory_str_to_bytes(). Binary suffixes first so
# "Mi" is never mistaken for "M".
_MEMORY_BYTES_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("K", 1000),
    ("M", 1000**2),
    ("G", 1000**3),
    ("T", 1000**4),
)

_MI = 1024**2


def parse_cpu(cpu_str: str) -> float:
    """Parse CPU string to cores (float).

    Handles various CPU resource formats:
    - Nanocores: "500000000n" -> 0.5 cores
    - Microcores: "500000u" -> 0.5 cores
    - Millicores: "100m" -> 0.1 cores
    - Decimal: "1.5" -> 1.5 cores

    Args:
        cpu_str: CPU value as string (e.g., "100m", "1.5", "500")

    Returns:
        CPU value in cores as float. Returns 0.0 on parse error or empty string.
    """
    if not cpu_str:
        return 0.0

    cpu_str = str(cpu_str).strip()

    divisors = {"n": 1_000_000_000, "u": 1_000_000, "m": 1000}
    divisor = divisors.get(cpu_str[-1:])
    if divisor is not None:
        cpu_str = cpu_str[:-1]

    try:
        value = float(cpu_str)
    except ValueError:
        return 0.0
    return value / divisor if divisor else value


def memory_str_to_bytes(memory_str: str) -> float:
    """Convert memory string to bytes.

    Args:
        memory_str: Memory value as string (e.g., "512Mi", "1Gi", "500M")

    Returns:
        Memory value in bytes as float. Returns 0.0 on parse error or empty string.
    """
    if not memory_str:
        return 0.0

    memory_str = str(memory_str).strip()

    for suffix, mult in _MEMORY_BYTES_MULTIPLIERS:
        if memory_str.endswith(suffix):
            try:
                return float(memory_str[: -len(suffix)]) * mult
            except ValueError:
                return 0.0

    try:
        return float(memory_str)
    except ValueError:
        return 0.0


def memory_str_to_mi(memory_str: str) -> float:
    """Convert memory string to mebibytes."""
    return memory_str_to_bytes(memory_str) / _MI


__all__ = [
    "memory_str_to_bytes",
    "memory_str_to_mi",
    "parse_cpu",
]
