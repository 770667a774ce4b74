"""Switchboard-backed role repository."""

from ....integrations.switchboard import SwitchboardClient, queries
from ....integrations.switchboard.payloads import require_field
from ..entities import RoleResolution


class SwitchboardRoleRepository:
    """Switchboard implementation of RoleRepository protocol."""

    def __init__(self, client: SwitchboardClient):
        self.client = client

    async def whoami(self, address: str) -> RoleResolution:
        data = await self.client.execute(queries.WHOAMI_QUERY, {"address": address})
        return RoleResolution.from_dict(require_field(data, "whoami"))
