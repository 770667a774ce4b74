"""Switchboard-backed group repository."""

import logging
from typing import Any, Dict, List, Optional

from ....integrations.switchboard import SwitchboardClient, queries
from ....integrations.switchboard.payloads import require_field, require_list
from ..entities import Group


logger = logging.getLogger(__name__)


class SwitchboardGroupRepository:
    """Switchboard implementation of GroupRepository protocol."""

    def __init__(self, client: SwitchboardClient):
        self.client = client

    def _build_groups(self, rows: List[Dict[str, Any]]) -> List[Group]:
        return [Group.from_dict(row) for row in rows if isinstance(row, dict) and row.get("id") is not None]

    async def list_groups(self) -> List[Group]:
        """List all groups."""
        data = await self.client.execute(queries.GROUPS_QUERY)
        return self._build_groups(require_list(data, "groups"))

    async def list_user_groups(self, user_address: str) -> List[Group]:
        """List the groups a user belongs to."""
        data = await self.client.execute(queries.USER_GROUPS_QUERY, {"userAddress": user_address})
        return self._build_groups(require_list(data, "userGroups"))

    async def create_group(self, name: str, description: Optional[str] = None) -> Group:
        """Create a new group."""
        data = await self.client.execute(
            queries.CREATE_GROUP_MUTATION,
            {"name": name, "description": description}
        )
        group = Group.from_dict(require_field(data, "createGroup"))
        logger.info(f"Created group {group.id} ({group.name})")
        return group

    async def delete_group(self, group_id: int) -> bool:
        """Delete a group."""
        data = await self.client.execute(queries.DELETE_GROUP_MUTATION, {"id": group_id})
        deleted = bool(data.get("deleteGroup"))
        logger.info(f"Deleted group {group_id}: {deleted}")
        return deleted

    async def add_member(self, user_address: str, group_id: int) -> bool:
        """Add a user to a group."""
        data = await self.client.execute(
            queries.ADD_USER_TO_GROUP_MUTATION,
            {"userAddress": user_address, "groupId": group_id}
        )
        return bool(data.get("addUserToGroup"))

    async def remove_member(self, user_address: str, group_id: int) -> bool:
        """Remove a user from a group."""
        data = await self.client.execute(
            queries.REMOVE_USER_FROM_GROUP_MUTATION,
            {"userAddress": user_address, "groupId": group_id}
        )
        return bool(data.get("removeUserFromGroup"))
