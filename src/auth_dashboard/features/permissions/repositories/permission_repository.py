"""Switchboard-backed document permission repository.

Maps ``documentAccess`` / ``userDocumentPermissions`` payloads to grant
entities and sends the user and group grant mutations.
"""

import logging
from typing import Any, Dict, List, Optional

from ....config.constants import PermissionLevel
from ....integrations.switchboard import SwitchboardClient, queries
from ....integrations.switchboard.payloads import require_field
from ....utils.timestamps import parse_timestamp
from ..entities import GrantTarget, ResourceAccess, ResourcePermission


logger = logging.getLogger(__name__)


def _parse_level(value: Any) -> Optional[PermissionLevel]:
    try:
        return PermissionLevel(str(value).upper())
    except ValueError:
        logger.warning(f"Ignoring grant with unknown permission level: {value!r}")
        return None


class SwitchboardPermissionRepository:
    """Switchboard implementation of PermissionRepository protocol."""

    def __init__(self, client: SwitchboardClient):
        self.client = client

    def _user_grant(self, resource_id: str, row: Dict[str, Any]) -> Optional[ResourcePermission]:
        level = _parse_level(row.get("permission"))
        if level is None or not row.get("userAddress"):
            return None
        return ResourcePermission(
            resource_id=row.get("documentId") or resource_id,
            target=GrantTarget.user(row["userAddress"]),
            level=level,
            granted_by=row.get("grantedBy"),
            created_at=parse_timestamp(row.get("createdAt")),
        )

    def _group_grant(self, resource_id: str, row: Dict[str, Any]) -> Optional[ResourcePermission]:
        level = _parse_level(row.get("permission"))
        if level is None or row.get("groupId") is None:
            return None
        group = row.get("group") or {}
        return ResourcePermission(
            resource_id=row.get("documentId") or resource_id,
            target=GrantTarget.group(row["groupId"]),
            level=level,
            granted_by=row.get("grantedBy"),
            created_at=parse_timestamp(row.get("createdAt")),
            group_name=group.get("name"),
        )

    async def get_resource_access(self, resource_id: str) -> ResourceAccess:
        """Get user and group grants of a resource."""
        data = await self.client.execute(queries.DOCUMENT_ACCESS_QUERY, {"documentId": resource_id})
        access = require_field(data, "documentAccess")

        user_grants = [
            self._user_grant(resource_id, row)
            for row in access.get("permissions") or []
            if isinstance(row, dict)
        ]
        group_grants = [
            self._group_grant(resource_id, row)
            for row in access.get("groupPermissions") or []
            if isinstance(row, dict)
        ]

        return ResourceAccess(
            resource_id=resource_id,
            user_grants=tuple(grant for grant in user_grants if grant),
            group_grants=tuple(grant for grant in group_grants if grant),
        )

    async def grant(self, resource_id: str, target: GrantTarget, level: PermissionLevel) -> None:
        """Grant ``level`` to a user or group."""
        if target.is_user:
            await self.client.execute(
                queries.GRANT_PERMISSION_MUTATION,
                {"documentId": resource_id, "userAddress": target.user_address, "permission": level.value}
            )
        else:
            await self.client.execute(
                queries.GRANT_GROUP_PERMISSION_MUTATION,
                {"documentId": resource_id, "groupId": target.group_id, "permission": level.value}
            )
        logger.info(f"Granted {level.value} on {resource_id} to {target}")

    async def revoke(self, resource_id: str, target: GrantTarget) -> bool:
        """Revoke the grant of a user or group."""
        if target.is_user:
            data = await self.client.execute(
                queries.REVOKE_PERMISSION_MUTATION,
                {"documentId": resource_id, "userAddress": target.user_address}
            )
            return bool(data.get("revokeDocumentPermission"))

        data = await self.client.execute(
            queries.REVOKE_GROUP_PERMISSION_MUTATION,
            {"documentId": resource_id, "groupId": target.group_id}
        )
        return bool(data.get("revokeGroupPermission"))

    async def list_user_document_permissions(self, user_address: str) -> List[ResourcePermission]:
        """List the caller's own document grants."""
        data = await self.client.execute(queries.USER_DOCUMENT_PERMISSIONS_QUERY)
        rows = data.get("userDocumentPermissions") or []

        permissions = []
        for row in rows:
            if not isinstance(row, dict) or not row.get("documentId"):
                continue
            grant = self._user_grant(row["documentId"], {**row, "userAddress": user_address})
            if grant:
                permissions.append(grant)
        return permissions
