"""Switchboard GraphQL integration."""

from .client import (
    SwitchboardClient,
    GraphQLResponse,
    check_switchboard_connectivity,
    is_mutation,
    UNREACHABLE_MESSAGE,
)
from .token_provider import JWTTokenProvider, StaticTokenProvider
from . import queries

__all__ = [
    "SwitchboardClient",
    "GraphQLResponse",
    "check_switchboard_connectivity",
    "is_mutation",
    "UNREACHABLE_MESSAGE",
    "JWTTokenProvider",
    "StaticTokenProvider",
    "queries",
]
