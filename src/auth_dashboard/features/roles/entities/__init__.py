"""Role entities package."""

from .role import RoleResolution, role_info
from .protocols import RoleRepository

__all__ = [
    "RoleResolution",
    "role_info",
    "RoleRepository",
]
