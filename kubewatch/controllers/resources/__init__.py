"""Resource listing domain."""

from kubewatch.controllers.resources.controller import ResourceController
from kubewatch.controllers.resources.fetcher import ResourceFetcher

__all__ = ["ResourceController", "ResourceFetcher"]
