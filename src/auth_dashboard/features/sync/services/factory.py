"""Service factory for the dashboard.

Builds the switchboard client, repositories, services and controllers for
one switchboard connection. Every component is created lazily and shared
by the controllers of that connection.
"""

import logging
from typing import Optional

import httpx

from ....config.settings import DashboardSettings
from ....core.shared import SessionContext
from ....integrations.switchboard import SwitchboardClient
from ...groups.repositories import SwitchboardGroupRepository
from ...groups.services import GroupRegistry
from ...permissions.repositories import (
    SwitchboardOperationPermissionRepository,
    SwitchboardPermissionRepository,
)
from ...permissions.services import (
    DocumentSchemaSource,
    DriveOperationLogSource,
    OperationPermissionService,
    PermissionService,
)
from ...resources.repositories import SwitchboardDriveRepository
from ...resources.services import ResourceTreeService
from ...roles.repositories import SwitchboardRoleRepository
from ...roles.services import RoleResolver
from .groups_controller import GroupsController
from .my_permissions_controller import MyPermissionsController
from .permissions_controller import PermissionsController


logger = logging.getLogger(__name__)


class DashboardServiceFactory:
    """Factory for creating dashboard services with proper dependency injection."""

    def __init__(
        self,
        settings: DashboardSettings,
        session: SessionContext,
        switchboard_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self.session = session
        self.switchboard_url = switchboard_url or settings.switchboard_url
        self.http_client = http_client

        self._client: Optional[SwitchboardClient] = None
        self._drive_repository: Optional[SwitchboardDriveRepository] = None
        self._operation_repository: Optional[SwitchboardOperationPermissionRepository] = None
        self._group_registry: Optional[GroupRegistry] = None
        self._tree_service: Optional[ResourceTreeService] = None
        self._permission_service: Optional[PermissionService] = None
        self._operation_service: Optional[OperationPermissionService] = None
        self._role_resolver: Optional[RoleResolver] = None

    def get_client(self) -> SwitchboardClient:
        """Get or create the switchboard client."""
        if not self._client:
            self._client = SwitchboardClient(
                url=self.switchboard_url,
                session=self.session,
                timeout_seconds=self.settings.request_timeout_seconds,
                token_expires_in=self.settings.token_expires_in_seconds,
                verify_ssl=self.settings.verify_ssl,
                http_client=self.http_client,
            )
        return self._client

    def get_drive_repository(self) -> SwitchboardDriveRepository:
        if not self._drive_repository:
            self._drive_repository = SwitchboardDriveRepository(self.get_client())
        return self._drive_repository

    def get_operation_repository(self) -> SwitchboardOperationPermissionRepository:
        if not self._operation_repository:
            self._operation_repository = SwitchboardOperationPermissionRepository(self.get_client())
        return self._operation_repository

    def get_group_registry(self) -> GroupRegistry:
        """Get or create the group directory shared by all views."""
        if not self._group_registry:
            self._group_registry = GroupRegistry(SwitchboardGroupRepository(self.get_client()))
        return self._group_registry

    def get_tree_service(self) -> ResourceTreeService:
        if not self._tree_service:
            self._tree_service = ResourceTreeService(self.get_drive_repository())
        return self._tree_service

    def get_permission_service(self) -> PermissionService:
        if not self._permission_service:
            self._permission_service = PermissionService(SwitchboardPermissionRepository(self.get_client()))
        return self._permission_service

    def get_operation_service(self) -> OperationPermissionService:
        """Get or create operation permission service."""
        if not self._operation_service:
            operation_repository = self.get_operation_repository()

            self._operation_service = OperationPermissionService(
                operation_repo=operation_repository,
                drive_source=DriveOperationLogSource(
                    self.get_drive_repository(),
                    page_size=self.settings.operation_log_page_size,
                ),
                document_source=DocumentSchemaSource(operation_repository),
            )
        return self._operation_service

    def get_role_resolver(self) -> RoleResolver:
        if not self._role_resolver:
            self._role_resolver = RoleResolver(SwitchboardRoleRepository(self.get_client()))
        return self._role_resolver

    def create_permissions_controller(self) -> PermissionsController:
        return PermissionsController(
            tree_service=self.get_tree_service(),
            group_registry=self.get_group_registry(),
            permission_service=self.get_permission_service(),
            operation_service=self.get_operation_service(),
            poll_interval_seconds=self.settings.poll_interval_seconds,
        )

    def create_groups_controller(self) -> GroupsController:
        return GroupsController(self.get_group_registry())

    def create_my_permissions_controller(self, is_admin: bool = False) -> MyPermissionsController:
        return MyPermissionsController(
            user_address=self.session.user_address,
            permission_service=self.get_permission_service(),
            group_registry=self.get_group_registry(),
            role_resolver=self.get_role_resolver(),
            is_admin=is_admin,
        )

    async def cleanup(self) -> None:
        """Cleanup factory resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
