"""Permissions feature for auth-dashboard.

- entities/: grant value objects and repository protocols
- services/: grant/revoke orchestration and operation-name discovery
- repositories/: switchboard data access
"""

from .entities import (
    GrantTarget,
    ResourcePermission,
    ResourceAccess,
    OperationPermission,
    OperationGrants,
    PermissionRepository,
    OperationPermissionRepository,
    OperationNameSource,
)
from .services import (
    PermissionService,
    OperationPermissionService,
    DriveOperationLogSource,
    DocumentSchemaSource,
    select_operation_name_source,
)
from .repositories import (
    SwitchboardPermissionRepository,
    SwitchboardOperationPermissionRepository,
)

__all__ = [
    # Entities
    "GrantTarget",
    "ResourcePermission",
    "ResourceAccess",
    "OperationPermission",
    "OperationGrants",

    # Protocols
    "PermissionRepository",
    "OperationPermissionRepository",
    "OperationNameSource",

    # Services
    "PermissionService",
    "OperationPermissionService",
    "DriveOperationLogSource",
    "DocumentSchemaSource",
    "select_operation_name_source",

    # Repositories
    "SwitchboardPermissionRepository",
    "SwitchboardOperationPermissionRepository",
]
