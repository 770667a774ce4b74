"""Infrastructure-specific exceptions for auth-dashboard.

This module defines exceptions related to the switchboard transport.
"""

from typing import Optional

from .base import AuthDashboardError


class TransportError(AuthDashboardError):
    """Base class for switchboard transport errors."""
    pass


class SwitchboardUnavailableError(TransportError):
    """Raised when the switchboard cannot be reached or times out."""
    pass


class RemoteStatusError(TransportError):
    """Raised when the switchboard answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        if status_code is not None:
            self.details["status_code"] = status_code


class InvalidResponseError(TransportError):
    """Raised when a switchboard response carries no usable data."""
    pass


class ConfigurationError(AuthDashboardError):
    """Raised when the client is used without required configuration."""
    pass


class RefreshFailedError(TransportError):
    """Raised when a mutation was applied but re-fetching the affected view failed.

    The message is shown verbatim; the stale view stays on screen.
    """
    pass
