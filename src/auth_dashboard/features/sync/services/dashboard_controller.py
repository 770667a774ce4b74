"""Dashboard controller.

Top-level state of the dashboard: the switchboard connection, the admin
check that decides which tabs are visible, and the per-tab controllers.
"""

import logging
from typing import List, Optional

import httpx

from ....config.constants import DashboardTab
from ....config.settings import DashboardSettings
from ....core.exceptions import describe_error
from ....core.shared import SessionContext
from ....integrations.switchboard import UNREACHABLE_MESSAGE, check_switchboard_connectivity
from ....utils.validation import validate_switchboard_url
from .factory import DashboardServiceFactory
from .groups_controller import GroupsController
from .my_permissions_controller import MyPermissionsController
from .permissions_controller import PermissionsController


logger = logging.getLogger(__name__)

ADMIN_TABS = [DashboardTab.GROUPS, DashboardTab.PERMISSIONS, DashboardTab.MY_PERMISSIONS]
NON_ADMIN_TABS = [DashboardTab.MY_PERMISSIONS]


class DashboardController:
    """Owns the switchboard connection and the controllers of each tab."""

    def __init__(
        self,
        settings: DashboardSettings,
        session: SessionContext,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self.session = session
        self.http_client = http_client

        self.switchboard_url: Optional[str] = settings.switchboard_url
        self.connection_error: Optional[str] = None

        # None while the admin check is pending
        self.is_admin: Optional[bool] = None
        self.active_tab = DashboardTab.MY_PERMISSIONS

        self.factory: Optional[DashboardServiceFactory] = None
        self.groups: Optional[GroupsController] = None
        self.permissions: Optional[PermissionsController] = None
        self.my_permissions: Optional[MyPermissionsController] = None

    @property
    def is_connected(self) -> bool:
        return self.switchboard_url is not None

    @property
    def is_ready(self) -> bool:
        return self.factory is not None and self.is_admin is not None

    @property
    def tabs(self) -> List[DashboardTab]:
        return list(ADMIN_TABS if self.is_admin else NON_ADMIN_TABS)

    # Connection

    async def connect(self, url: str) -> bool:
        """Validate a switchboard URL, check it responds, then make it current.

        On failure ``connection_error`` holds the message and the current
        connection is kept.
        """
        try:
            validated = validate_switchboard_url(url)
            await check_switchboard_connectivity(
                validated,
                http_client=self.http_client,
                timeout_seconds=self.settings.request_timeout_seconds,
            )
        except Exception as e:
            self.connection_error = describe_error(e, UNREACHABLE_MESSAGE)
            return False

        await self.stop()
        self.switchboard_url = validated
        self.connection_error = None
        logger.info(f"Connected to switchboard {validated}")
        return True

    async def disconnect(self) -> None:
        await self.stop()
        self.switchboard_url = None
        self.connection_error = None

    # Lifecycle

    async def start(self) -> bool:
        """Build the tab controllers once the caller is logged in and connected.

        Returns False without contacting the switchboard when either is
        missing.
        """
        if not self.session.is_logged_in:
            logger.debug("Dashboard not started: caller is not logged in")
            return False
        if not self.is_connected:
            logger.debug("Dashboard not started: no switchboard configured")
            return False

        await self.stop()
        self.factory = DashboardServiceFactory(
            self.settings,
            self.session,
            switchboard_url=self.switchboard_url,
            http_client=self.http_client,
        )
        await self.check_admin()

        self.groups = self.factory.create_groups_controller()
        self.permissions = self.factory.create_permissions_controller()
        self.my_permissions = self.factory.create_my_permissions_controller(is_admin=bool(self.is_admin))

        await self.open_tab(self.active_tab)
        return True

    async def stop(self) -> None:
        """Stop background work and release the switchboard client."""
        if self.permissions is not None:
            await self.permissions.stop()
        if self.factory is not None:
            await self.factory.cleanup()

        self.factory = None
        self.groups = None
        self.permissions = None
        self.my_permissions = None
        self.is_admin = None
        self.active_tab = DashboardTab.MY_PERMISSIONS

    async def __aenter__(self) -> "DashboardController":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    async def check_admin(self) -> bool:
        """Ask the authority whether the caller is an admin; failure means no."""
        self.is_admin = None
        resolver = self.factory.get_role_resolver()
        self.is_admin = await resolver.is_admin(self.session.user_address)
        self.active_tab = DashboardTab.GROUPS if self.is_admin else DashboardTab.MY_PERMISSIONS
        logger.info(f"Admin check for {self.session.user_address}: {self.is_admin}")
        return self.is_admin

    # Tabs

    async def open_tab(self, tab: DashboardTab) -> bool:
        """Switch to a visible tab and load its data.

        Leaving the permissions tab stops its polling.
        """
        tab = DashboardTab(tab)
        if tab not in self.tabs or self.factory is None:
            return False

        if tab != DashboardTab.PERMISSIONS and self.permissions is not None:
            await self.permissions.stop()

        self.active_tab = tab
        if tab == DashboardTab.GROUPS:
            await self.groups.load()
        elif tab == DashboardTab.PERMISSIONS:
            await self.permissions.start()
        else:
            await self.my_permissions.load()
        return True
