"""Errors raised while fetching resources from a cluster."""

from __future__ import annotations


class FetchError(Exception):
    """Base exception for resource fetch failures."""

    def __init__(self, message: str, context: str | None = None) -> None:
        super().__init__(message)
        self.context = context

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.context}: {message}" if self.context else message


class KubectlError(FetchError):
    """kubectl exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        context: str | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message, context)
        self.returncode = returncode


class FetchTimeoutError(FetchError):
    """kubectl did not finish within the command timeout."""


__all__ = ["FetchError", "FetchTimeoutError", "KubectlError"]
