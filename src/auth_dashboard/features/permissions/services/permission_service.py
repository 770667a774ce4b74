"""Document permission service.

Mutations are never applied optimistically: each grant or revoke goes to
the authority first and the resource's access view is re-fetched
afterwards. A failed mutation raises and nothing is re-fetched. A failed
re-fetch after an applied mutation raises RefreshFailedError.
"""

import logging
from typing import List

from ....config.constants import PermissionLevel
from ....core.exceptions import RefreshFailedError
from ....utils.validation import validate_address
from ..entities import GrantTarget, PermissionRepository, ResourceAccess, ResourcePermission


logger = logging.getLogger(__name__)


class PermissionService:
    """Service for per-resource permission levels."""

    def __init__(self, permission_repo: PermissionRepository):
        self.permission_repo = permission_repo

    async def get_access(self, resource_id: str) -> ResourceAccess:
        """Get the access view of one resource."""
        return await self.permission_repo.get_resource_access(resource_id)

    async def grant(self, resource_id: str, target: GrantTarget, level: PermissionLevel) -> ResourceAccess:
        """Grant ``level`` to ``target`` and return the refreshed access view.

        Re-granting replaces the previous level of the same target.
        """
        await self.permission_repo.grant(resource_id, target, PermissionLevel(level))
        return await self._reload_access(resource_id)

    async def revoke(self, resource_id: str, target: GrantTarget) -> ResourceAccess:
        """Revoke the grant of ``target`` and return the refreshed access view."""
        revoked = await self.permission_repo.revoke(resource_id, target)
        if not revoked:
            logger.info(f"No grant to revoke on {resource_id} for {target}")
        return await self._reload_access(resource_id)

    async def _reload_access(self, resource_id: str) -> ResourceAccess:
        try:
            return await self.get_access(resource_id)
        except Exception as e:
            logger.warning(f"Permission change on {resource_id} applied but reload failed: {e}")
            raise RefreshFailedError(
                "Permission updated, but reloading failed",
                details={"resource_id": resource_id}
            ) from e

    async def list_my_permissions(self, user_address: str) -> List[ResourcePermission]:
        """List the document grants of the signed-in caller."""
        address = validate_address(user_address)
        return await self.permission_repo.list_user_document_permissions(address)
