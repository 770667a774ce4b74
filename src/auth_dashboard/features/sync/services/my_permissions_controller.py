"""My-permissions view controller.

Shows what the signed-in caller holds: their document grants, their
groups and their global role. Only the document grants are primary; the
group list and the role are best effort.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from ....config.constants import GlobalRole
from ....core.exceptions import describe_error
from ...groups.entities import Group
from ...groups.services import GroupRegistry
from ...permissions.entities import ResourcePermission
from ...permissions.services import PermissionService
from ...roles.entities import role_info
from ...roles.services import RoleResolver


logger = logging.getLogger(__name__)


class MyPermissionsController:
    """State and actions behind the my-permissions tab."""

    def __init__(
        self,
        user_address: str,
        permission_service: PermissionService,
        group_registry: GroupRegistry,
        role_resolver: RoleResolver,
        is_admin: bool = False,
    ):
        self.user_address = user_address
        self.permission_service = permission_service
        self.group_registry = group_registry
        self.role_resolver = role_resolver
        self.is_admin = is_admin

        self.permissions: List[ResourcePermission] = []
        self.groups: List[Group] = []
        self.global_role = GlobalRole.ADMIN if is_admin else GlobalRole.GUEST
        self.lookup_address = user_address
        self.loading = True
        self.error: Optional[str] = None

    @property
    def role_info(self) -> Dict[str, str]:
        return role_info(self.global_role)

    async def load(self) -> None:
        """Load grants, groups and role of the caller concurrently."""
        await asyncio.gather(
            self.load_my_permissions(),
            self._load_own_groups(),
            self.load_role(),
        )

    async def load_my_permissions(self) -> None:
        self.loading = True
        self.error = None
        try:
            self.permissions = await self.permission_service.list_my_permissions(self.user_address)
        except Exception as e:
            logger.warning(f"Failed to load permissions of {self.user_address}: {e}")
            self.error = describe_error(e, "Failed to load permissions")
        finally:
            self.loading = False

    async def _load_own_groups(self) -> None:
        try:
            self.groups = await self.group_registry.lookup_user_groups(self.user_address)
        except Exception as e:
            logger.warning(f"Group memberships of {self.user_address} unavailable: {e}")

    async def load_role(self) -> GlobalRole:
        known = GlobalRole.ADMIN if self.is_admin else None
        self.global_role = await self.role_resolver.resolve_global_role(self.user_address, fallback=known)
        return self.global_role

    async def lookup_groups(self, address: Optional[str] = None) -> bool:
        """Show the groups of an arbitrary address; blank input is ignored."""
        candidate = (address if address is not None else self.lookup_address or "").strip()
        if not candidate:
            return False

        self.lookup_address = candidate
        self.error = None
        try:
            self.groups = await self.group_registry.lookup_user_groups(candidate)
        except Exception as e:
            self.error = describe_error(e, "Failed to load user groups")
            return False
        return True
