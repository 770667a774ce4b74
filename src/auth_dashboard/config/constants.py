"""Constants and enums for auth-dashboard.

This module defines the enums and default values used throughout the
dashboard. Enum values match the wire values of the switchboard GraphQL
schema so they can be sent and parsed without translation.
"""

from enum import Enum
from typing import Final, Dict


class PermissionLevel(str, Enum):
    """Document permission levels - corresponds to DocumentPermissionLevel.

    Levels are totally ordered: READ < WRITE < ADMIN.
    """

    READ = "READ"
    WRITE = "WRITE"
    ADMIN = "ADMIN"

    @property
    def rank(self) -> int:
        """Numerical rank for comparison (higher = more privileged)."""
        return _PERMISSION_RANKS[self.value]

    def includes(self, other: "PermissionLevel") -> bool:
        """Check if this level grants at least what ``other`` grants."""
        return self.rank >= other.rank

    def __lt__(self, other):
        if not isinstance(other, PermissionLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, PermissionLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, PermissionLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, PermissionLevel):
            return NotImplemented
        return self.rank >= other.rank


_PERMISSION_RANKS: Dict[str, int] = {
    "READ": 1,
    "WRITE": 2,
    "ADMIN": 3,
}


class NodeKind(str, Enum):
    """Resource node kinds in a drive hierarchy."""

    DRIVE = "drive"
    FOLDER = "folder"
    FILE = "file"


class GlobalRole(str, Enum):
    """System-wide caller roles, independent of any resource grant."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class LoginStatus(str, Enum):
    """Login states reported by the hosting session."""

    INITIAL = "initial"
    CHECKING = "checking"
    AUTHORIZED = "authorized"
    NOT_AUTHORIZED = "not-authorized"
    UNAUTHORIZED = "unauthorized"


class DashboardTab(str, Enum):
    """Dashboard tabs."""

    GROUPS = "groups"
    PERMISSIONS = "permissions"
    MY_PERMISSIONS = "my-permissions"


# Display placeholders for unnamed nodes
class NodePlaceholders:
    """Fallback names for nodes without a display name."""

    DRIVE: Final[str] = "Untitled Drive"
    FOLDER: Final[str] = "Untitled Folder"
    FILE: Final[str] = "Untitled"


class SyncDefaults:
    """Default values for the sync controllers and switchboard client."""

    POLL_INTERVAL_SECONDS: Final[float] = 10.0
    OPERATION_LOG_PAGE_SIZE: Final[int] = 200
    REQUEST_TIMEOUT_SECONDS: Final[float] = 30.0
    TOKEN_EXPIRES_IN_SECONDS: Final[int] = 600
    TOKEN_ALGORITHM: Final[str] = "HS256"


ROLE_INFO: Dict[GlobalRole, Dict[str, str]] = {
    GlobalRole.ADMIN: {
        "label": "Admin",
        "description": "Full access - can manage drives, permissions, groups, and all documents.",
    },
    GlobalRole.USER: {
        "label": "User",
        "description": "Standard access - can create and edit documents you have permission for.",
    },
    GlobalRole.GUEST: {
        "label": "Guest",
        "description": "Read-only access - can view documents with explicit permissions.",
    },
}
