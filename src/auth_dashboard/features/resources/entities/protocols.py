"""Protocol interfaces for the resources feature."""

from abc import abstractmethod
from typing import List, Protocol, runtime_checkable

from .resource_node import DriveRecord, DriveSummary


@runtime_checkable
class DriveRepository(Protocol):
    """Protocol for reading drives from the authority."""

    @abstractmethod
    async def list_drives(self) -> List[DriveSummary]:
        """List every drive visible to the caller."""
        ...

    @abstractmethod
    async def get_drive_detail(self, drive_id: str) -> DriveRecord:
        """Get a drive with its flat node list."""
        ...

    @abstractmethod
    async def list_operation_log(self, drive_id: str, first: int) -> List[str]:
        """Get operation type names of the first ``first`` entries of a drive's log."""
        ...
