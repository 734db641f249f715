"""Base controller with async worker-friendly patterns for KubeWatch.

This module provides the foundation for background data loading using Textual
Workers, ensuring the UI remains responsive during kubectl calls.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Any

from kubewatch.constants.timeouts import KUBECTL_COMMAND_TIMEOUT
from kubewatch.controllers.errors import FetchError, FetchTimeoutError, KubectlError

logger = logging.getLogger(__name__)


def run_kubectl_sync(
    args: tuple[str, ...],
    context: str | None = None,
    timeout: int = KUBECTL_COMMAND_TIMEOUT,
) -> str:
    """Run a kubectl command synchronously (thread-safe wrapper target).

    Raises:
        FetchTimeoutError: If the command exceeds ``timeout`` seconds.
        KubectlError: If kubectl exits non-zero.
        FetchError: If kubectl cannot be started.
    """
    cmd = ["kubectl"]
    if context:
        cmd.extend(["--context", context])
    cmd.extend(args)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        raise FetchTimeoutError(f"kubectl timed out after {timeout}s", context) from exc
    except OSError as exc:
        raise FetchError(f"failed to run kubectl: {exc}", context) from exc
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise KubectlError(stderr or "kubectl command failed", context, result.returncode)
    return result.stdout


class BaseController(ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    def __init__(self, context: str | None = None) -> None:
        self.context = context

    async def _run_kubectl(self, args: tuple[str, ...], context: str | None = None) -> str:
        """Run kubectl off the event loop."""
        effective_context = context if context is not None else self.context
        logger.debug("kubectl %s (context=%s)", " ".join(args), effective_context or "current")
        return await asyncio.to_thread(run_kubectl_sync, args, effective_context)

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all data from the source.

        Returns:
            Dictionary containing all fetched data
        """
        ...


__all__ = ["BaseController", "run_kubectl_sync"]
