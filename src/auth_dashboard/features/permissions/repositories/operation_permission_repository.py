"""Switchboard-backed operation permission repository."""

import logging
from typing import Any, Dict, List

from ....integrations.switchboard import SwitchboardClient, queries
from ....integrations.switchboard.payloads import require_field
from ..entities import GrantTarget, OperationGrants, OperationPermission


logger = logging.getLogger(__name__)


class SwitchboardOperationPermissionRepository:
    """Switchboard implementation of OperationPermissionRepository protocol."""

    def __init__(self, client: SwitchboardClient):
        self.client = client

    async def get_operation_permissions(self, resource_id: str, operation_name: str) -> OperationGrants:
        """Get user and group grants for one operation."""
        data = await self.client.execute(
            queries.OPERATION_PERMISSIONS_QUERY,
            {"documentId": resource_id, "operationType": operation_name}
        )
        payload = require_field(data, "operationPermissions")

        user_grants = tuple(
            OperationPermission(
                resource_id=resource_id,
                operation_name=operation_name,
                target=GrantTarget.user(row["userAddress"]),
                granted_by=row.get("grantedBy"),
            )
            for row in payload.get("userPermissions") or []
            if isinstance(row, dict) and row.get("userAddress")
        )
        group_grants = tuple(
            self._group_grant(resource_id, operation_name, row)
            for row in payload.get("groupPermissions") or []
            if isinstance(row, dict) and row.get("groupId") is not None
        )

        return OperationGrants(
            resource_id=resource_id,
            operation_name=operation_name,
            user_grants=user_grants,
            group_grants=group_grants,
        )

    def _group_grant(self, resource_id: str, operation_name: str, row: Dict[str, Any]) -> OperationPermission:
        group = row.get("group") or {}
        return OperationPermission(
            resource_id=resource_id,
            operation_name=operation_name,
            target=GrantTarget.group(row["groupId"]),
            granted_by=row.get("grantedBy"),
            group_name=group.get("name"),
        )

    def _variables(self, resource_id: str, operation_name: str, target: GrantTarget) -> Dict[str, Any]:
        variables: Dict[str, Any] = {"documentId": resource_id, "operationType": operation_name}
        if target.is_user:
            variables["userAddress"] = target.user_address
        else:
            variables["groupId"] = target.group_id
        return variables

    async def grant(self, resource_id: str, operation_name: str, target: GrantTarget) -> None:
        """Allow a user or group to invoke an operation."""
        mutation = (
            queries.GRANT_OPERATION_PERMISSION_MUTATION
            if target.is_user
            else queries.GRANT_GROUP_OPERATION_PERMISSION_MUTATION
        )
        await self.client.execute(mutation, self._variables(resource_id, operation_name, target))
        logger.info(f"Granted operation {operation_name} on {resource_id} to {target}")

    async def revoke(self, resource_id: str, operation_name: str, target: GrantTarget) -> bool:
        """Withdraw an operation grant."""
        variables = self._variables(resource_id, operation_name, target)
        if target.is_user:
            data = await self.client.execute(queries.REVOKE_OPERATION_PERMISSION_MUTATION, variables)
            return bool(data.get("revokeOperationPermission"))

        data = await self.client.execute(queries.REVOKE_GROUP_OPERATION_PERMISSION_MUTATION, variables)
        return bool(data.get("revokeGroupOperationPermission"))

    async def list_document_operation_names(self, resource_id: str) -> List[str]:
        """Operation names declared by a document's type."""
        data = await self.client.execute(queries.DOCUMENT_OPERATIONS_QUERY, {"documentId": resource_id})
        payload = require_field(data, "documentOperations")
        return [
            operation["name"]
            for operation in payload.get("operations") or []
            if isinstance(operation, dict) and operation.get("name")
        ]
