"""Groups view controller."""

import logging
from typing import Optional, Tuple

from ....core.exceptions import describe_error
from ...groups.entities import Group
from ...groups.services import GroupRegistry


logger = logging.getLogger(__name__)


class GroupsController:
    """State and actions behind the groups tab.

    Each mutation is followed by a full directory reload; a failure sets
    ``error`` and leaves the directory as it was.
    """

    def __init__(self, group_registry: GroupRegistry):
        self.group_registry = group_registry
        self.loading = True
        self.error: Optional[str] = None
        self.expanded_group: Optional[int] = None

    @property
    def groups(self) -> Tuple[Group, ...]:
        return self.group_registry.groups

    async def load(self) -> None:
        self.loading = True
        self.error = None
        try:
            await self.group_registry.refresh()
        except Exception as e:
            logger.warning(f"Failed to load groups: {e}")
            self.error = describe_error(e, "Failed to load groups")
        finally:
            self.loading = False

    async def create_group(self, name: str, description: Optional[str] = None) -> Optional[Group]:
        try:
            return await self.group_registry.create_group(name, description)
        except Exception as e:
            self.error = describe_error(e, "Failed to create group")
            return None

    async def delete_group(self, group_id: int) -> bool:
        try:
            await self.group_registry.delete_group(group_id)
        except Exception as e:
            self.error = describe_error(e, "Failed to delete group")
            return False

        if self.expanded_group == group_id:
            self.expanded_group = None
        return True

    async def add_member(self, group_id: int, user_address: str) -> bool:
        try:
            await self.group_registry.add_member(user_address, group_id)
        except Exception as e:
            self.error = describe_error(e, "Failed to add member")
            return False
        return True

    async def remove_member(self, group_id: int, user_address: str) -> bool:
        try:
            await self.group_registry.remove_member(user_address, group_id)
        except Exception as e:
            self.error = describe_error(e, "Failed to remove member")
            return False
        return True

    def toggle_group(self, group_id: int) -> None:
        """Expand a group's member list, or collapse it when already expanded."""
        self.expanded_group = None if self.expanded_group == group_id else group_id
