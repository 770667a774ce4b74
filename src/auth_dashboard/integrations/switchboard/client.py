"""
GraphQL client for the switchboard authority.

Every request carries a freshly minted bearer token when the session can
produce one. Reads fall back to unauthenticated requests; mutations refuse
to go out without a credential.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel

from ...config.constants import SyncDefaults
from ...config.settings import DashboardSettings
from ...core.exceptions import (
    BusinessRejectionError,
    ConfigurationError,
    CredentialRejectedError,
    InvalidResponseError,
    MissingCredentialsError,
    RemoteStatusError,
    SwitchboardUnavailableError,
)
from ...core.shared import SessionContext
from .queries import TYPENAME_QUERY

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Could not reach the switchboard. Make sure the reactor is running."

# GraphQL error codes that mean the credential was missing or refused
AUTH_ERROR_CODES = {"UNAUTHENTICATED", "FORBIDDEN", "UNAUTHORIZED"}


class GraphQLErrorModel(BaseModel):
    """Single entry of a GraphQL ``errors`` array."""

    message: str
    extensions: Optional[Dict[str, Any]] = None

    @property
    def code(self) -> Optional[str]:
        if not self.extensions:
            return None
        code = self.extensions.get("code")
        return str(code).upper() if code else None


class GraphQLResponse(BaseModel):
    """GraphQL response envelope."""

    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[GraphQLErrorModel]] = None


def is_mutation(query: str) -> bool:
    """Check if a GraphQL document is a mutation."""
    return query.lstrip().startswith("mutation")


async def check_switchboard_connectivity(
    url: str,
    http_client: Optional[httpx.AsyncClient] = None,
    timeout_seconds: float = SyncDefaults.REQUEST_TIMEOUT_SECONDS
) -> None:
    """Check a switchboard endpoint with an unauthenticated GET.

    Raises:
        SwitchboardUnavailableError: Endpoint unreachable or not healthy
    """
    params = {"query": TYPENAME_QUERY}
    headers = {"apollo-require-preflight": "true"}

    try:
        if http_client:
            response = await http_client.get(url, params=params, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=timeout_seconds) as client:
                response = await client.get(url, params=params, headers=headers)
    except httpx.HTTPError as e:
        logger.warning(f"Switchboard connectivity check failed for {url}: {e}")
        raise SwitchboardUnavailableError(UNREACHABLE_MESSAGE, details={"url": url, "error": str(e)})

    if not response.is_success:
        logger.warning(f"Switchboard connectivity check for {url} returned HTTP {response.status_code}")
        raise SwitchboardUnavailableError(
            UNREACHABLE_MESSAGE,
            details={"url": url, "status_code": response.status_code}
        )


class SwitchboardClient:
    """Authenticated GraphQL client for a switchboard endpoint."""

    def __init__(
        self,
        url: str,
        session: SessionContext,
        timeout_seconds: float = SyncDefaults.REQUEST_TIMEOUT_SECONDS,
        token_expires_in: int = SyncDefaults.TOKEN_EXPIRES_IN_SECONDS,
        verify_ssl: bool = True,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize switchboard client.

        Args:
            url: GraphQL endpoint of the switchboard
            session: Caller session providing identity and tokens
            timeout_seconds: Request timeout
            token_expires_in: Lifetime of each bearer token in seconds
            verify_ssl: Whether to verify TLS certificates
            http_client: Pre-built HTTP client (the caller keeps ownership)
        """
        if not url:
            raise ConfigurationError("No switchboard URL configured")

        self.url = url
        self.session = session
        self.timeout_seconds = timeout_seconds
        self.token_expires_in = token_expires_in
        self.verify_ssl = verify_ssl

        self._http_client = http_client
        self._owns_client = http_client is None

        logger.info(f"Initialized SwitchboardClient for {self.url}")

    @classmethod
    def from_settings(
        cls,
        settings: DashboardSettings,
        session: SessionContext,
        http_client: Optional[httpx.AsyncClient] = None
    ) -> "SwitchboardClient":
        """Build a client from dashboard settings."""
        if not settings.switchboard_url:
            raise ConfigurationError("No switchboard URL configured")
        return cls(
            url=settings.switchboard_url,
            session=session,
            timeout_seconds=settings.request_timeout_seconds,
            token_expires_in=settings.token_expires_in_seconds,
            verify_ssl=settings.verify_ssl,
            http_client=http_client,
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout_seconds,
                verify=self.verify_ssl
            )
        return self._http_client

    async def _get_bearer_token(self) -> Optional[str]:
        """Mint a bearer token for the current session, if possible."""
        if not self.session.can_sign:
            return None

        try:
            return await self.session.token_provider.get_bearer_token(
                self.url,
                self.session.user_address,
                self.token_expires_in
            )
        except Exception as e:
            # Reads still go out unauthenticated; writes are refused below
            logger.warning(f"Bearer token generation failed for {self.session.user_address}: {e}")
            return None

    async def _build_headers(self, require_auth: bool) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}

        token = await self._get_bearer_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        elif require_auth:
            raise MissingCredentialsError(
                "Login required: no bearer credential available for this request",
                details={"url": self.url}
            )
        return headers

    async def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL document and return its ``data`` object.

        Raises:
            MissingCredentialsError: Mutation attempted without a credential
            CredentialRejectedError: Switchboard rejected the credential
            SwitchboardUnavailableError: Network failure or timeout
            RemoteStatusError: Non-success HTTP status
            InvalidResponseError: Malformed body or no data
            BusinessRejectionError: GraphQL errors returned by the switchboard
        """
        headers = await self._build_headers(require_auth=is_mutation(query))

        body: Dict[str, Any] = {"query": query}
        if variables is not None:
            body["variables"] = variables

        try:
            response = await self.http_client.post(self.url, json=body, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Switchboard request timed out after {self.timeout_seconds}s: {e}")
            raise SwitchboardUnavailableError(
                f"Switchboard request timed out after {self.timeout_seconds} seconds",
                details={"url": self.url}
            )
        except httpx.HTTPError as e:
            logger.error(f"Switchboard request failed: {e}")
            raise SwitchboardUnavailableError(
                f"Switchboard request failed: {e}",
                details={"url": self.url, "error_type": type(e).__name__}
            )

        if response.status_code in (401, 403):
            raise CredentialRejectedError(
                f"HTTP {response.status_code}: {response.text or response.reason_phrase}",
                details={"status_code": response.status_code}
            )
        if not response.is_success:
            raise RemoteStatusError(
                f"HTTP {response.status_code}: {response.text or response.reason_phrase}",
                status_code=response.status_code
            )

        try:
            payload = GraphQLResponse.model_validate(response.json())
        except ValueError as e:
            raise InvalidResponseError(
                f"Invalid response from switchboard: {e}",
                details={"url": self.url}
            )

        if payload.errors:
            messages = [error.message for error in payload.errors]
            joined = "; ".join(messages)
            if any(error.code in AUTH_ERROR_CODES for error in payload.errors):
                raise CredentialRejectedError(joined, details={"messages": messages})
            raise BusinessRejectionError(joined, messages=messages)

        if payload.data is None:
            raise InvalidResponseError("No data returned")

        return payload.data

    async def check_connectivity(self) -> None:
        """Check that this client's switchboard endpoint responds."""
        await check_switchboard_connectivity(self.url, http_client=self.http_client)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "SwitchboardClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
