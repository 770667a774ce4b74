"""Role services package."""

from .role_resolver import RoleResolver

__all__ = [
    "RoleResolver",
]
