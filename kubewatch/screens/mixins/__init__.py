"""Reusable screen mixins."""

from kubewatch.screens.mixins.worker_mixin import WorkerMixin

__all__ = ["WorkerMixin"]
