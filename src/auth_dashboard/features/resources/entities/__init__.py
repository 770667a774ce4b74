"""Resource entities package."""

from .resource_node import RawNode, DriveSummary, DriveRecord, ResourceNode
from .resource_tree import ResourceTree
from .protocols import DriveRepository

__all__ = [
    "RawNode",
    "DriveSummary",
    "DriveRecord",
    "ResourceNode",
    "ResourceTree",
    "DriveRepository",
]
