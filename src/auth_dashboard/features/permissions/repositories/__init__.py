"""Permission repositories package."""

from .permission_repository import SwitchboardPermissionRepository
from .operation_permission_repository import SwitchboardOperationPermissionRepository

__all__ = [
    "SwitchboardPermissionRepository",
    "SwitchboardOperationPermissionRepository",
]
