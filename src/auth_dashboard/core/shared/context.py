"""Session context entity.

This module defines the SessionContext handed to every component that needs
the caller's identity. The hosting application owns login and token
acquisition; components receive them through this object instead of reading
process-wide state.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from ...config.constants import LoginStatus


@runtime_checkable
class TokenProvider(Protocol):
    """Protocol for producing bearer tokens for the caller."""

    async def get_bearer_token(
        self,
        audience: str,
        address: str,
        expires_in: int
    ) -> Optional[str]:
        """Produce a short-lived bearer token for ``address`` scoped to ``audience``."""
        ...


@dataclass
class SessionContext:
    """Caller session: identity, login status and credential source."""

    user_address: Optional[str] = None
    login_status: LoginStatus = LoginStatus.INITIAL
    token_provider: Optional[TokenProvider] = None

    @property
    def is_logged_in(self) -> bool:
        """Check if the caller is logged in and authorized."""
        return bool(self.user_address) and self.login_status == LoginStatus.AUTHORIZED

    @property
    def is_checking(self) -> bool:
        """Check if the login status is still being determined."""
        return self.login_status in (LoginStatus.INITIAL, LoginStatus.CHECKING)

    @property
    def can_sign(self) -> bool:
        """Check if bearer tokens can be produced for this session."""
        return self.token_provider is not None and bool(self.user_address)
