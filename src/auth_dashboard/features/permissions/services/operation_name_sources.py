"""Operation name sources.

Drives record every applied operation in their log, so the names are
taken from there. Documents declare their operations through their type.
"""

import logging
from typing import List

from ....config.constants import SyncDefaults
from ...resources.entities import DriveRepository, ResourceNode
from ..entities import OperationNameSource, OperationPermissionRepository


logger = logging.getLogger(__name__)


class DriveOperationLogSource:
    """Distinct operation types of the first page of a drive's log."""

    def __init__(self, drive_repo: DriveRepository, page_size: int = SyncDefaults.OPERATION_LOG_PAGE_SIZE):
        self.drive_repo = drive_repo
        self.page_size = page_size

    async def list_operation_names(self, node: ResourceNode) -> List[str]:
        types = await self.drive_repo.list_operation_log(node.id, self.page_size)
        return sorted(set(types))


class DocumentSchemaSource:
    """Operation names declared by a document's type."""

    def __init__(self, operation_repo: OperationPermissionRepository):
        self.operation_repo = operation_repo

    async def list_operation_names(self, node: ResourceNode) -> List[str]:
        names = await self.operation_repo.list_document_operation_names(node.id)
        return sorted(set(names))


def select_operation_name_source(
    node: ResourceNode,
    drive_source: OperationNameSource,
    document_source: OperationNameSource,
) -> OperationNameSource:
    """Pick the name source matching the node kind."""
    return drive_source if node.is_drive else document_source
