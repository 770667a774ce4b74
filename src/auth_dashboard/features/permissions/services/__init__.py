"""Permission services package."""

from .permission_service import PermissionService
from .operation_permission_service import OperationPermissionService
from .operation_name_sources import (
    DriveOperationLogSource,
    DocumentSchemaSource,
    select_operation_name_source,
)

__all__ = [
    "PermissionService",
    "OperationPermissionService",
    "DriveOperationLogSource",
    "DocumentSchemaSource",
    "select_operation_name_source",
]
