"""Bearer token providers for switchboard requests."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt
from jose.exceptions import JOSEError

from ...config.constants import SyncDefaults
from ...config.settings import DashboardSettings
from ...core.exceptions import TokenGenerationError

logger = logging.getLogger(__name__)


class JWTTokenProvider:
    """Signs short-lived JWT bearer tokens for the session's address.

    The token subject is the caller's address and its audience is the
    switchboard URL, so a token minted for one switchboard is not accepted
    by another.
    """

    def __init__(
        self,
        signing_key: str,
        algorithm: str = SyncDefaults.TOKEN_ALGORITHM,
        issuer: Optional[str] = None
    ):
        if not signing_key:
            raise TokenGenerationError("A signing key is required to issue bearer tokens")
        self.signing_key = signing_key
        self.algorithm = algorithm
        self.issuer = issuer

    @classmethod
    def from_settings(
        cls,
        settings: DashboardSettings,
        signing_key: str,
        issuer: Optional[str] = None
    ) -> "JWTTokenProvider":
        """Build a provider signing with the configured algorithm."""
        return cls(signing_key, algorithm=settings.token_algorithm, issuer=issuer)

    async def get_bearer_token(
        self,
        audience: str,
        address: str,
        expires_in: int
    ) -> Optional[str]:
        """Issue a token for ``address`` valid for ``expires_in`` seconds."""
        issued_at = datetime.now(timezone.utc)
        claims = {
            "sub": address,
            "iss": self.issuer or address,
            "aud": audience,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=expires_in),
        }

        try:
            return jwt.encode(claims, self.signing_key, algorithm=self.algorithm)
        except JOSEError as e:
            logger.error(f"Failed to sign bearer token for {address}: {e}")
            raise TokenGenerationError(
                f"Failed to sign bearer token: {e}",
                details={"algorithm": self.algorithm}
            )


class StaticTokenProvider:
    """Returns a pre-issued bearer token regardless of audience."""

    def __init__(self, token: Optional[str]):
        self.token = token

    async def get_bearer_token(
        self,
        audience: str,
        address: str,
        expires_in: int
    ) -> Optional[str]:
        return self.token
