"""Role repositories package."""

from .role_repository import SwitchboardRoleRepository

__all__ = [
    "SwitchboardRoleRepository",
]
