"""Switchboard-backed drive repository.

Concrete implementation of the DriveRepository protocol over the
switchboard GraphQL API.
"""

import logging
from typing import Any, Dict, List, Optional

from ....core.exceptions import InvalidResponseError
from ....integrations.switchboard import SwitchboardClient, queries
from ....integrations.switchboard.payloads import require_field, require_list
from ..entities import DriveRecord, DriveSummary, RawNode


logger = logging.getLogger(__name__)


def _require_object(value: Any, field: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise InvalidResponseError(f"Switchboard field '{field}' is not an object", details={"field": field})
    return value


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


class SwitchboardDriveRepository:
    """Switchboard implementation of DriveRepository protocol."""

    def __init__(self, client: SwitchboardClient):
        self.client = client

    async def list_drives(self) -> List[DriveSummary]:
        """List every drive visible to the caller."""
        data = await self.client.execute(queries.DRIVES_LIST_QUERY)
        summaries = []
        for row in require_list(data, "driveDocuments"):
            drive_id = _text(row.get("id")) if isinstance(row, dict) else None
            if drive_id:
                summaries.append(DriveSummary(id=drive_id, name=_text(row.get("name")) or ""))
        return summaries

    async def get_drive_detail(self, drive_id: str) -> DriveRecord:
        """Get a drive with its flat node list."""
        data = await self.client.execute(queries.DRIVE_DETAIL_QUERY, {"idOrSlug": drive_id})
        document = _require_object(require_field(data, "driveDocument"), "driveDocument")
        state = _require_object(document.get("state") or {}, "driveDocument.state")
        rows = state.get("nodes") or []
        if not isinstance(rows, list):
            raise InvalidResponseError(
                f"Drive {drive_id} reported malformed nodes",
                details={"field": "driveDocument.state.nodes"}
            )

        nodes = [RawNode.from_dict(row) for row in rows if isinstance(row, dict)]
        logger.debug(f"Loaded drive {drive_id} with {len(nodes)} nodes")

        return DriveRecord(
            id=_text(document.get("id")) or drive_id,
            name=_text(document.get("name")) or _text(state.get("name")),
            nodes=nodes,
        )

    async def list_operation_log(self, drive_id: str, first: int) -> List[str]:
        """Get operation type names of the first ``first`` entries of a drive's log."""
        data = await self.client.execute(
            queries.DRIVE_OPERATIONS_QUERY,
            {"idOrSlug": drive_id, "first": first}
        )
        document = _require_object(require_field(data, "driveDocument"), "driveDocument")
        return [
            entry["type"]
            for entry in document.get("operations") or []
            if isinstance(entry, dict) and entry.get("type")
        ]
