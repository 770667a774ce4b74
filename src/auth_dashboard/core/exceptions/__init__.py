"""Exception hierarchy for auth-dashboard.

Taxonomy:
- TransportError: switchboard unreachable, non-success status, unusable body
- AuthenticationError: missing, unsignable or rejected credentials
- ValidationError: input rejected locally before any remote call
- BusinessRejectionError: the switchboard refused the operation
"""

from .base import AuthDashboardError
from .auth import (
    AuthenticationError,
    MissingCredentialsError,
    CredentialRejectedError,
    TokenGenerationError,
)
from .domain import ValidationError, BusinessRejectionError
from .infrastructure import (
    TransportError,
    SwitchboardUnavailableError,
    RemoteStatusError,
    InvalidResponseError,
    RefreshFailedError,
    ConfigurationError,
)


AUTHENTICATION_MESSAGE = "Authentication failed. Please log in again to continue."


def describe_error(exception: BaseException, fallback: str) -> str:
    """Convert an exception into a user-visible message.

    Validation errors, business rejections and failed re-fetches after an
    applied mutation are shown verbatim. Authentication failures get a
    fixed re-login message; anything else is reported with the generic
    ``fallback`` for the action that failed.
    """
    if isinstance(exception, (ValidationError, BusinessRejectionError, RefreshFailedError)):
        return exception.message
    if isinstance(exception, AuthenticationError):
        return AUTHENTICATION_MESSAGE
    return fallback


__all__ = [
    # Base
    "AuthDashboardError",
    "describe_error",
    "AUTHENTICATION_MESSAGE",

    # Auth
    "AuthenticationError",
    "MissingCredentialsError",
    "CredentialRejectedError",
    "TokenGenerationError",

    # Domain
    "ValidationError",
    "BusinessRejectionError",

    # Infrastructure
    "TransportError",
    "SwitchboardUnavailableError",
    "RemoteStatusError",
    "InvalidResponseError",
    "RefreshFailedError",
    "ConfigurationError",
]
