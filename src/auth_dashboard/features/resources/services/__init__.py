"""Resource services package."""

from .tree_builder import build_tree, build_drive
from .resource_tree_service import ResourceTreeService

__all__ = [
    "build_tree",
    "build_drive",
    "ResourceTreeService",
]
