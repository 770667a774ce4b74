"""Resource tree service.

Loads the drive list and every drive's detail concurrently, isolating
per-drive failures, and builds a fresh ResourceTree.
"""

import asyncio
import logging
from typing import List

from ..entities import DriveRecord, DriveRepository, DriveSummary, ResourceTree
from .tree_builder import build_tree


logger = logging.getLogger(__name__)


class ResourceTreeService:
    """Service orchestrating drive fetches and tree construction."""

    def __init__(self, drive_repo: DriveRepository):
        self.drive_repo = drive_repo

    async def load_drive_records(self) -> List[DriveRecord]:
        """Fetch the drive list, then every drive's detail in parallel.

        A drive whose detail fetch fails is kept with an empty node list.
        A failing drive list propagates to the caller.
        """
        summaries = await self.drive_repo.list_drives()
        return list(await asyncio.gather(*(self._load_record(summary) for summary in summaries)))

    async def load_tree(self) -> ResourceTree:
        """Load all drives and build the resource tree."""
        records = await self.load_drive_records()
        tree = ResourceTree(build_tree(records))
        logger.debug(f"Built resource tree with {len(tree)} drive(s)")
        return tree

    async def _load_record(self, summary: DriveSummary) -> DriveRecord:
        try:
            return await self.drive_repo.get_drive_detail(summary.id)
        except Exception as e:
            logger.warning(f"Failed to load drive {summary.id}, showing it empty: {e}")
            return DriveRecord.empty(summary)
