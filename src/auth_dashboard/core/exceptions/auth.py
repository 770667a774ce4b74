"""Authentication-specific exceptions for auth-dashboard."""

from .base import AuthDashboardError


class AuthenticationError(AuthDashboardError):
    """Base exception for authentication errors."""
    pass


class MissingCredentialsError(AuthenticationError):
    """Raised when a call that needs caller identity has no bearer token."""
    pass


class CredentialRejectedError(AuthenticationError):
    """Raised when the switchboard rejects the attached credential."""
    pass


class TokenGenerationError(AuthenticationError):
    """Raised when a bearer token cannot be produced."""
    pass
