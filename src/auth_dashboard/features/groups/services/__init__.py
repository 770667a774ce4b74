"""Group services package."""

from .group_service import GroupRegistry

__all__ = [
    "GroupRegistry",
]
