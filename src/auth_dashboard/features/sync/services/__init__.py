"""Sync services package.

Controllers holding view state and the factory wiring them together.
"""

from .permissions_controller import PermissionsController
from .groups_controller import GroupsController
from .my_permissions_controller import MyPermissionsController
from .dashboard_controller import DashboardController, ADMIN_TABS, NON_ADMIN_TABS
from .factory import DashboardServiceFactory

__all__ = [
    # Controllers
    "PermissionsController",
    "GroupsController",
    "MyPermissionsController",
    "DashboardController",
    "ADMIN_TABS",
    "NON_ADMIN_TABS",

    # Wiring
    "DashboardServiceFactory",
]
