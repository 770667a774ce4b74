"""Resources feature for auth-dashboard.

Feature-first layout for the drive/folder/file hierarchy:
- entities/: raw node records, tree nodes, tree snapshot and protocols
- services/: tree construction and drive loading
- repositories/: switchboard data access
"""

from .entities import (
    RawNode, DriveSummary, DriveRecord, ResourceNode, ResourceTree, DriveRepository
)
from .services import build_tree, build_drive, ResourceTreeService
from .repositories import SwitchboardDriveRepository

__all__ = [
    # Entities
    "RawNode",
    "DriveSummary",
    "DriveRecord",
    "ResourceNode",
    "ResourceTree",

    # Protocols
    "DriveRepository",

    # Services
    "build_tree",
    "build_drive",
    "ResourceTreeService",

    # Repository Implementations
    "SwitchboardDriveRepository",
]
