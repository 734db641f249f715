"""Base controller classes."""

from kubewatch.controllers.base.base_controller import BaseController, run_kubectl_sync

__all__ = ["BaseController", "run_kubectl_sync"]
