"""Grant domain entities for the permissions feature.

Two independent layers hang off every resource:

- ``ResourcePermission``: a READ/WRITE/ADMIN level for a user or group;
- ``OperationPermission``: a binary right to invoke one named operation.

Neither layer is inherited along the drive/folder/file hierarchy; every
resource carries its own records.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ....config.constants import PermissionLevel
from ....core.exceptions import ValidationError
from ....utils.addresses import same_address


@dataclass(frozen=True)
class GrantTarget:
    """Immutable value object naming who a grant is for: a user xor a group."""

    user_address: Optional[str] = None
    group_id: Optional[int] = None

    def __post_init__(self):
        """Validate that exactly one of user/group is set."""
        has_user = bool(self.user_address and self.user_address.strip())
        has_group = self.group_id is not None

        if has_user == has_group:
            raise ValidationError("A grant target must be either a user address or a group id", field="target")

        if has_user and self.user_address != self.user_address.strip():
            object.__setattr__(self, "user_address", self.user_address.strip())

    @classmethod
    def user(cls, user_address: str) -> "GrantTarget":
        if not user_address or not user_address.strip():
            raise ValidationError("User address is required", field="user_address")
        return cls(user_address=user_address)

    @classmethod
    def group(cls, group_id: int) -> "GrantTarget":
        if group_id is None:
            raise ValidationError("Group is required", field="group_id")
        return cls(group_id=int(group_id))

    @property
    def is_user(self) -> bool:
        return self.user_address is not None

    @property
    def is_group(self) -> bool:
        return self.group_id is not None

    def matches(self, other: "GrantTarget") -> bool:
        """Check if two targets name the same principal (addresses ignore case)."""
        if self.is_user and other.is_user:
            return same_address(self.user_address, other.user_address)
        if self.is_group and other.is_group:
            return self.group_id == other.group_id
        return False

    def __str__(self) -> str:
        return f"user:{self.user_address}" if self.is_user else f"group:{self.group_id}"


@dataclass(frozen=True)
class ResourcePermission:
    """A privilege level granted to one target on one resource."""

    resource_id: str
    target: GrantTarget
    level: PermissionLevel
    granted_by: Optional[str] = None
    created_at: Optional[datetime] = None
    group_name: Optional[str] = None

    def allows(self, required: PermissionLevel) -> bool:
        """Check if this grant covers ``required``."""
        return self.level.includes(required)

    def __repr__(self) -> str:
        return f"ResourcePermission({self.resource_id}, {self.target}, {self.level.value})"


@dataclass(frozen=True)
class ResourceAccess:
    """The access view of one resource: user grants and group grants."""

    resource_id: str
    user_grants: Tuple[ResourcePermission, ...] = ()
    group_grants: Tuple[ResourcePermission, ...] = ()

    @property
    def all_grants(self) -> Tuple[ResourcePermission, ...]:
        return self.user_grants + self.group_grants

    @property
    def is_empty(self) -> bool:
        return not self.user_grants and not self.group_grants

    def find_grant(self, target: GrantTarget) -> Optional[ResourcePermission]:
        pool = self.user_grants if target.is_user else self.group_grants
        for grant in pool:
            if grant.target.matches(target):
                return grant
        return None

    def level_for(self, target: GrantTarget) -> Optional[PermissionLevel]:
        """Level granted directly to ``target`` on this resource, if any."""
        grant = self.find_grant(target)
        return grant.level if grant else None


@dataclass(frozen=True)
class OperationPermission:
    """The right of one target to invoke one named operation on one resource."""

    resource_id: str
    operation_name: str
    target: GrantTarget
    granted_by: Optional[str] = None
    group_name: Optional[str] = None


@dataclass(frozen=True)
class OperationGrants:
    """All grants for one operation on one resource."""

    resource_id: str
    operation_name: str
    user_grants: Tuple[OperationPermission, ...] = ()
    group_grants: Tuple[OperationPermission, ...] = ()

    @classmethod
    def empty(cls, resource_id: str, operation_name: str) -> "OperationGrants":
        """Placeholder for an operation whose grants could not be loaded."""
        return cls(resource_id=resource_id, operation_name=operation_name)

    @property
    def is_empty(self) -> bool:
        return not self.user_grants and not self.group_grants

    def allows(self, target: GrantTarget) -> bool:
        """Check if ``target`` holds a direct grant for this operation."""
        pool = self.user_grants if target.is_user else self.group_grants
        return any(grant.target.matches(target) for grant in pool)
