"""Global role resolution.

Roles are advisory: they decide what the dashboard shows, never what the
authority allows. A failed lookup therefore degrades to the least
privileged answer instead of surfacing an error.
"""

import logging
from typing import Optional

from ....config.constants import GlobalRole
from ....utils.validation import validate_address
from ..entities import RoleRepository, RoleResolution


logger = logging.getLogger(__name__)


class RoleResolver:
    """Resolves the global role of an address."""

    def __init__(self, role_repo: RoleRepository):
        self.role_repo = role_repo

    async def resolve_role(self, address: str) -> RoleResolution:
        """Single authority lookup; errors propagate."""
        return await self.role_repo.whoami(validate_address(address))

    async def resolve_global_role(
        self,
        address: str,
        fallback: Optional[GlobalRole] = None
    ) -> GlobalRole:
        """Resolve the role of ``address``.

        On failure returns ``fallback`` (the previously known role) or
        GUEST when nothing is known.
        """
        try:
            resolution = await self.resolve_role(address)
        except Exception as e:
            degraded = GlobalRole(fallback) if fallback is not None else GlobalRole.GUEST
            logger.warning(f"Role lookup failed for {address}, using {degraded.value}: {e}")
            return degraded

        return resolution.global_role

    async def is_admin(self, address: str) -> bool:
        """Check the admin flag; any failure counts as not admin."""
        try:
            resolution = await self.resolve_role(address)
        except Exception as e:
            logger.warning(f"Admin check failed for {address}: {e}")
            return False
        return resolution.is_admin
