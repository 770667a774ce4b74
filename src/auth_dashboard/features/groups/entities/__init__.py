"""Group entities package."""

from .group import Group
from .protocols import GroupRepository

__all__ = [
    "Group",
    "GroupRepository",
]
