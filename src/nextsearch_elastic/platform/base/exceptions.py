"""Platform-specific exceptions."""

from __future__ import annotations


class PlatformError(Exception):
    """Base exception for platform errors."""


class ConnectionError(PlatformError):
    """Raised when the platform cannot connect to the search cluster."""


class ConfigurationError(PlatformError):
    """Raised when the platform configuration is invalid or rejected by the cluster."""


class RemoteError(PlatformError):
    """Raised when the search cluster answers a request with an error.

    Args:
        message: Human-readable description.
        status_code: HTTP status code reported by the cluster, if any.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteNotFoundError(RemoteError):
    """Raised when the requested index, pipeline or document does not exist."""


class RemoteBadRequestError(RemoteError):
    """Raised when the cluster rejects a request as malformed."""
