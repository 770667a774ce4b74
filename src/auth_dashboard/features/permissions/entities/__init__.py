"""Permission entities package.

Domain entities and protocols for resource and operation grants.
"""

from .grant import (
    GrantTarget,
    ResourcePermission,
    ResourceAccess,
    OperationPermission,
    OperationGrants,
)
from .protocols import (
    PermissionRepository,
    OperationPermissionRepository,
    OperationNameSource,
)

__all__ = [
    # Domain entities
    "GrantTarget",
    "ResourcePermission",
    "ResourceAccess",
    "OperationPermission",
    "OperationGrants",

    # Protocols
    "PermissionRepository",
    "OperationPermissionRepository",
    "OperationNameSource",
]
