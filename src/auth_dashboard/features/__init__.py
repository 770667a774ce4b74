"""Features module for auth-dashboard.

Each feature follows the same layout (entities, repositories, services);
the sync feature wires the others into view controllers.
"""

# Resource tree
from .resources import ResourceTreeService, build_tree

# Groups
from .groups import GroupRegistry

# Permissions
from .permissions import PermissionService, OperationPermissionService

# Roles
from .roles import RoleResolver

# Controllers
from .sync import (
    DashboardController,
    PermissionsController,
    GroupsController,
    MyPermissionsController,
    DashboardServiceFactory,
)

__all__ = [
    # Resource tree
    "ResourceTreeService",
    "build_tree",

    # Groups
    "GroupRegistry",

    # Permissions
    "PermissionService",
    "OperationPermissionService",

    # Roles
    "RoleResolver",

    # Controllers
    "DashboardController",
    "PermissionsController",
    "GroupsController",
    "MyPermissionsController",
    "DashboardServiceFactory",
]
