"""Groups feature for auth-dashboard.

- entities/: Group entity and repository protocol
- services/: group directory and membership orchestration
- repositories/: switchboard data access
"""

from .entities import Group, GroupRepository
from .services import GroupRegistry
from .repositories import SwitchboardGroupRepository

__all__ = [
    "Group",
    "GroupRepository",
    "GroupRegistry",
    "SwitchboardGroupRepository",
]
