"""
Domain exceptions for validation and business rule failures.
"""
from typing import List, Optional

from .base import AuthDashboardError


class ValidationError(AuthDashboardError):
    """Raised when input is rejected locally before any remote call."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if field:
            self.details["field"] = field


class BusinessRejectionError(AuthDashboardError):
    """Raised when the switchboard refuses an operation.

    The message is the authority's own wording and is shown verbatim.
    """

    def __init__(
        self,
        message: str,
        messages: Optional[List[str]] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.messages = messages or [message]
        self.details["messages"] = self.messages
