"""Group domain entity for the groups feature.

A named set of user addresses, usable as a permission target.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ....core.exceptions import ValidationError
from ....utils.addresses import same_address
from ....utils.timestamps import parse_timestamp


@dataclass(frozen=True)
class Group:
    """Domain entity representing a user group."""

    id: int
    name: str
    description: Optional[str] = None
    members: Tuple[str, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate and normalize the member list."""
        if not self.name:
            raise ValidationError("Group name cannot be empty", field="name")

        # Members behave as a set but keep their reported order
        unique = tuple(dict.fromkeys(self.members))
        if unique != self.members:
            object.__setattr__(self, "members", unique)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        """Build from a switchboard group payload."""
        return cls(
            id=int(data["id"]),
            name=data.get("name") or f"Group {data['id']}",
            description=data.get("description") or None,
            members=tuple(data.get("members") or ()),
            created_at=parse_timestamp(data.get("createdAt")),
        )

    @property
    def member_count(self) -> int:
        return len(self.members)

    def has_member(self, address: str) -> bool:
        """Check membership, ignoring address case."""
        return any(same_address(member, address) for member in self.members)

    def __str__(self) -> str:
        return f"Group({self.id}:{self.name})"
