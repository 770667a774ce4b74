"""Sync feature for auth-dashboard.

- entities/: generation counters for stale-result suppression
- services/: view controllers, polling and service wiring
"""

from .entities import Generation
from .services import (
    PermissionsController,
    GroupsController,
    MyPermissionsController,
    DashboardController,
    DashboardServiceFactory,
    ADMIN_TABS,
    NON_ADMIN_TABS,
)

__all__ = [
    "Generation",
    "PermissionsController",
    "GroupsController",
    "MyPermissionsController",
    "DashboardController",
    "DashboardServiceFactory",
    "ADMIN_TABS",
    "NON_ADMIN_TABS",
]
