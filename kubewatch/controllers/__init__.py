"""Controllers module for KubeWatch.

Controllers fetch Kubernetes resources with kubectl off the UI loop and turn
them into refresh events for the table engine.
"""

from __future__ import annotations

from kubewatch.controllers.base import BaseController
from kubewatch.controllers.errors import FetchError, FetchTimeoutError, KubectlError
from kubewatch.controllers.resources.controller import ResourceController
from kubewatch.controllers.resources.fetcher import ResourceFetcher

__all__ = [
    "BaseController",
    "FetchError",
    "FetchTimeoutError",
    "KubectlError",
    "ResourceController",
    "ResourceFetcher",
]
