"""Group repositories."""

from .group_repository import SwitchboardGroupRepository

__all__ = [
    "SwitchboardGroupRepository",
]
