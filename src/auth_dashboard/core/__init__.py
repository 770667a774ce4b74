"""Core package for auth-dashboard.

Contains the exception hierarchy and the session context shared by all
features.
"""

from .exceptions import (
    AuthDashboardError,
    AuthenticationError,
    BusinessRejectionError,
    TransportError,
    ValidationError,
    describe_error,
)
from .shared import SessionContext, TokenProvider

__all__ = [
    "AuthDashboardError",
    "AuthenticationError",
    "BusinessRejectionError",
    "TransportError",
    "ValidationError",
    "describe_error",
    "SessionContext",
    "TokenProvider",
]
