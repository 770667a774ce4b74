"""Roles feature for auth-dashboard.

- entities/: role resolution entity and repository protocol
- services/: role resolution with graceful degradation
- repositories/: switchboard data access
"""

from .entities import RoleResolution, RoleRepository, role_info
from .services import RoleResolver
from .repositories import SwitchboardRoleRepository

__all__ = [
    "RoleResolution",
    "RoleRepository",
    "role_info",
    "RoleResolver",
    "SwitchboardRoleRepository",
]
