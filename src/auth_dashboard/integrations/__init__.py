"""External system integrations for auth-dashboard."""

from .switchboard import SwitchboardClient, JWTTokenProvider, StaticTokenProvider

__all__ = [
    "SwitchboardClient",
    "JWTTokenProvider",
    "StaticTokenProvider",
]
