"""Auth Dashboard - access-control console for a document switchboard.

Browses the drive/folder/file hierarchy of a switchboard, manages user
groups and grants document and operation permissions through its GraphQL
API.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

# Configuration
from .config import (
    DashboardSettings,
    get_settings,
    PermissionLevel,
    NodeKind,
    GlobalRole,
    LoginStatus,
    DashboardTab,
)

# Core
from .core import (
    AuthDashboardError,
    AuthenticationError,
    BusinessRejectionError,
    TransportError,
    ValidationError,
    describe_error,
    SessionContext,
    TokenProvider,
)

# Switchboard integration
from .integrations.switchboard import (
    SwitchboardClient,
    JWTTokenProvider,
    StaticTokenProvider,
    check_switchboard_connectivity,
)

# Domain entities
from .features.resources import ResourceNode, ResourceTree, DriveRecord
from .features.groups import Group
from .features.permissions import (
    GrantTarget,
    ResourcePermission,
    ResourceAccess,
    OperationPermission,
    OperationGrants,
)
from .features.roles import RoleResolution

# Services and controllers
from .features import (
    ResourceTreeService,
    build_tree,
    GroupRegistry,
    PermissionService,
    OperationPermissionService,
    RoleResolver,
    DashboardController,
    PermissionsController,
    GroupsController,
    MyPermissionsController,
    DashboardServiceFactory,
)

# Utilities
from .utils import format_address, shorten_address

__all__ = [
    "__version__",

    # Configuration
    "DashboardSettings",
    "get_settings",
    "PermissionLevel",
    "NodeKind",
    "GlobalRole",
    "LoginStatus",
    "DashboardTab",

    # Core
    "AuthDashboardError",
    "AuthenticationError",
    "BusinessRejectionError",
    "TransportError",
    "ValidationError",
    "describe_error",
    "SessionContext",
    "TokenProvider",

    # Switchboard integration
    "SwitchboardClient",
    "JWTTokenProvider",
    "StaticTokenProvider",
    "check_switchboard_connectivity",

    # Domain entities
    "ResourceNode",
    "ResourceTree",
    "DriveRecord",
    "Group",
    "GrantTarget",
    "ResourcePermission",
    "ResourceAccess",
    "OperationPermission",
    "OperationGrants",
    "RoleResolution",

    # Services and controllers
    "ResourceTreeService",
    "build_tree",
    "GroupRegistry",
    "PermissionService",
    "OperationPermissionService",
    "RoleResolver",
    "DashboardController",
    "PermissionsController",
    "GroupsController",
    "MyPermissionsController",
    "DashboardServiceFactory",

    # Utilities
    "format_address",
    "shorten_address",
]
