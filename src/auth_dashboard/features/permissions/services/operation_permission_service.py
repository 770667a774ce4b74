"""Operation permission service.

Lists per-operation grants of a resource by discovering its operation
names first and then fetching the grants of every name concurrently.
"""

import asyncio
import logging
from typing import List

from ....core.exceptions import RefreshFailedError
from ....utils.validation import validate_operation_name
from ...resources.entities import ResourceNode
from ..entities import (
    GrantTarget,
    OperationGrants,
    OperationNameSource,
    OperationPermissionRepository,
)
from .operation_name_sources import select_operation_name_source


logger = logging.getLogger(__name__)


class OperationPermissionService:
    """Service for binary per-operation grants."""

    def __init__(
        self,
        operation_repo: OperationPermissionRepository,
        drive_source: OperationNameSource,
        document_source: OperationNameSource,
    ):
        self.operation_repo = operation_repo
        self.drive_source = drive_source
        self.document_source = document_source

    async def list_operation_names(self, node: ResourceNode) -> List[str]:
        source = select_operation_name_source(node, self.drive_source, self.document_source)
        return await source.list_operation_names(node)

    async def _load_grants(self, resource_id: str, operation_name: str) -> OperationGrants:
        try:
            return await self.operation_repo.get_operation_permissions(resource_id, operation_name)
        except Exception as e:
            logger.warning(f"Failed to load grants for operation {operation_name} on {resource_id}: {e}")
            return OperationGrants.empty(resource_id, operation_name)

    async def list_operation_permissions(self, node: ResourceNode) -> List[OperationGrants]:
        """Grants of every operation of ``node``, in operation-name order.

        A failing per-operation fetch yields an empty entry for that name.
        """
        names = await self.list_operation_names(node)
        if not names:
            return []

        return list(await asyncio.gather(*(self._load_grants(node.id, name) for name in names)))

    async def _reload(self, node: ResourceNode) -> List[OperationGrants]:
        try:
            return await self.list_operation_permissions(node)
        except Exception as e:
            logger.warning(f"Operation permission change on {node.id} applied but reload failed: {e}")
            raise RefreshFailedError(
                "Operation permission updated, but reloading failed",
                details={"resource_id": node.id}
            ) from e

    async def grant(self, node: ResourceNode, operation_name: str, target: GrantTarget) -> List[OperationGrants]:
        """Allow ``target`` to invoke an operation and re-list the node's grants."""
        await self.operation_repo.grant(node.id, validate_operation_name(operation_name), target)
        return await self._reload(node)

    async def revoke(self, node: ResourceNode, operation_name: str, target: GrantTarget) -> List[OperationGrants]:
        """Withdraw an operation grant and re-list the node's grants."""
        revoked = await self.operation_repo.revoke(node.id, validate_operation_name(operation_name), target)
        if not revoked:
            logger.info(f"No grant for operation {operation_name} on {node.id} held by {target}")
        return await self._reload(node)
