"""Group registry service.

Keeps the latest group directory snapshot and runs group mutations, each
followed by a full directory reload. Input is validated before any
remote call.
"""

import logging
from typing import List, Optional, Tuple

from ....utils.validation import validate_address, validate_group_name, normalize_description
from ..entities import Group, GroupRepository


logger = logging.getLogger(__name__)


class GroupRegistry:
    """Directory of groups backed by the authority."""

    def __init__(self, group_repo: GroupRepository):
        self.group_repo = group_repo
        self._groups: Tuple[Group, ...] = ()

    @property
    def groups(self) -> Tuple[Group, ...]:
        """Latest successfully loaded directory snapshot."""
        return self._groups

    async def refresh(self) -> Tuple[Group, ...]:
        """Reload the directory and replace the snapshot."""
        groups = tuple(await self.group_repo.list_groups())
        self._groups = groups
        logger.debug(f"Group directory refreshed: {len(groups)} group(s)")
        return groups

    def get(self, group_id: int) -> Optional[Group]:
        """Find a group in the current snapshot."""
        for group in self._groups:
            if group.id == group_id:
                return group
        return None

    def groups_for(self, user_address: str) -> List[Group]:
        """Groups of the current snapshot containing ``user_address``."""
        return [group for group in self._groups if group.has_member(user_address)]

    async def lookup_user_groups(self, user_address: str) -> List[Group]:
        """Ask the authority which groups ``user_address`` belongs to."""
        address = validate_address(user_address)
        return await self.group_repo.list_user_groups(address)

    async def create_group(self, name: str, description: Optional[str] = None) -> Group:
        """Create a group and reload the directory."""
        group = await self.group_repo.create_group(
            validate_group_name(name),
            normalize_description(description)
        )
        await self.refresh()
        return group

    async def delete_group(self, group_id: int) -> None:
        """Delete a group and reload the directory."""
        await self.group_repo.delete_group(group_id)
        await self.refresh()

    async def add_member(self, user_address: str, group_id: int) -> None:
        """Add a member and reload the directory."""
        address = validate_address(user_address)
        await self.group_repo.add_member(address, group_id)
        logger.info(f"Added {address} to group {group_id}")
        await self.refresh()

    async def remove_member(self, user_address: str, group_id: int) -> None:
        """Remove a member and reload the directory."""
        address = validate_address(user_address)
        await self.group_repo.remove_member(address, group_id)
        logger.info(f"Removed {address} from group {group_id}")
        await self.refresh()
