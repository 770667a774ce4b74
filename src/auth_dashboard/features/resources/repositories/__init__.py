"""Resource repositories."""

from .drive_repository import SwitchboardDriveRepository

__all__ = [
    "SwitchboardDriveRepository",
]
