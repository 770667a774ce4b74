"""Role resolution entity for the roles feature."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ....config.constants import GlobalRole, ROLE_INFO


@dataclass(frozen=True)
class RoleResolution:
    """Flags reported by the authority for one address."""

    address: Optional[str] = None
    is_admin: bool = False
    is_user: bool = False
    is_guest: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoleResolution":
        """Build from a switchboard ``whoami`` payload."""
        return cls(
            address=data.get("address"),
            is_admin=bool(data.get("isAdmin")),
            is_user=bool(data.get("isUser")),
            is_guest=bool(data.get("isGuest")),
        )

    @property
    def global_role(self) -> GlobalRole:
        """Highest role among the reported flags; GUEST when none is set."""
        if self.is_admin:
            return GlobalRole.ADMIN
        if self.is_user:
            return GlobalRole.USER
        return GlobalRole.GUEST


def role_info(role: GlobalRole) -> Dict[str, str]:
    """Display label and description of a role."""
    return ROLE_INFO[GlobalRole(role)]
