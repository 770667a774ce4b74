"""Shared core components."""

from .context import SessionContext, TokenProvider

__all__ = [
    "SessionContext",
    "TokenProvider",
]
