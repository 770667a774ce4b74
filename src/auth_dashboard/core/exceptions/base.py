"""Base exceptions for auth-dashboard.

All exceptions inherit from AuthDashboardError and carry an error code and
structured details alongside the human-readable message.
"""

from typing import Any, Dict, Optional


class AuthDashboardError(Exception):
    """Base exception for all auth-dashboard errors.

    All exceptions in the package inherit from this base class and include
    structured error information for logging and user-facing messages.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

