"""Permissions view controller.

Holds the resource tree, the selected resource's access and operation
views and runs grant/revoke mutations against the selected resource.

Every view is a disposable cache: it is replaced wholesale by each
successful fetch and never patched locally. Tree loads and selections
carry generation tokens so that a slower, older response cannot
overwrite a newer one.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Set, Tuple, TypeVar

from ....config.constants import PermissionLevel, SyncDefaults
from ....core.exceptions import describe_error
from ....utils.validation import validate_address
from ...groups.entities import Group
from ...groups.services import GroupRegistry
from ...permissions.entities import GrantTarget, OperationGrants, ResourceAccess
from ...permissions.services import OperationPermissionService, PermissionService
from ...resources.entities import ResourceNode, ResourceTree
from ...resources.services import ResourceTreeService
from ..entities import Generation


logger = logging.getLogger(__name__)

T = TypeVar("T")


class PermissionsController:
    """State and actions behind the permissions tab."""

    def __init__(
        self,
        tree_service: ResourceTreeService,
        group_registry: GroupRegistry,
        permission_service: PermissionService,
        operation_service: OperationPermissionService,
        poll_interval_seconds: float = SyncDefaults.POLL_INTERVAL_SECONDS,
    ):
        self.tree_service = tree_service
        self.group_registry = group_registry
        self.permission_service = permission_service
        self.operation_service = operation_service
        self.poll_interval_seconds = poll_interval_seconds

        self.tree = ResourceTree()
        self.expanded_ids: Set[str] = set()
        self.selected_id: Optional[str] = None
        self.selected_label: str = ""
        self.access: Optional[ResourceAccess] = None
        self.operation_permissions: List[OperationGrants] = []
        self.error: Optional[str] = None
        self.loading = True
        self.access_loading = False

        self._tree_generation = Generation()
        self._selection_generation = Generation()
        self._tree_loaded = False
        self._poll_task: Optional[asyncio.Task] = None

    @property
    def available_groups(self) -> Tuple[Group, ...]:
        return self.group_registry.groups

    @property
    def is_polling(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    # Lifecycle

    async def start(self) -> None:
        """Run the initial loads and start periodic tree refresh."""
        await asyncio.gather(self.load_tree(), self.load_groups())
        if not self.is_polling:
            self._poll_task = asyncio.create_task(self._poll())
            logger.debug(f"Tree polling started every {self.poll_interval_seconds}s")

    async def stop(self) -> None:
        """Cancel the polling task."""
        task, self._poll_task = self._poll_task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("Tree polling stopped")

    async def __aenter__(self) -> "PermissionsController":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    async def _poll(self) -> None:
        while True:
            await asyncio.sleep(self.poll_interval_seconds)
            await self.load_tree()

    # Loading

    async def load_tree(self) -> None:
        """Reload every drive and replace the tree."""
        generation = self._tree_generation.advance()
        try:
            tree = await self.tree_service.load_tree()
        except Exception as e:
            if self._tree_generation.is_current(generation):
                logger.warning(f"Tree load failed: {e}")
                self.error = describe_error(e, "Failed to load documents")
            return
        finally:
            if self._tree_generation.is_current(generation):
                self.loading = False

        if not self._tree_generation.is_current(generation):
            logger.debug(f"Discarding stale tree load {generation}")
            return

        self.tree = tree
        if not self._tree_loaded:
            self._tree_loaded = True
            if not self.expanded_ids:
                self.expanded_ids = set(tree.drive_ids)

    async def load_groups(self) -> None:
        """Reload the group directory used by grant forms; failures keep the old one."""
        try:
            await self.group_registry.refresh()
        except Exception as e:
            logger.warning(f"Group directory refresh failed: {e}")

    async def refresh_groups(self) -> None:
        await self.load_groups()

    # Selection

    def toggle_expand(self, resource_id: str) -> None:
        if resource_id in self.expanded_ids:
            self.expanded_ids.discard(resource_id)
        else:
            self.expanded_ids.add(resource_id)

    async def select(self, resource_id: str) -> None:
        """Select a resource, or deselect it when it is already selected."""
        generation = self._selection_generation.advance()
        self.access = None
        self.operation_permissions = []

        if self.selected_id == resource_id:
            self.selected_id = None
            self.selected_label = ""
            self.access_loading = False
            return

        self.selected_id = resource_id
        self.selected_label = self.tree.node_label(resource_id)
        self.error = None

        await asyncio.gather(
            self._load_access(resource_id, generation),
            self._load_operation_permissions(resource_id, generation),
        )

    async def _load_access(self, resource_id: str, generation: int) -> None:
        self.access_loading = True
        try:
            access = await self.permission_service.get_access(resource_id)
        except Exception as e:
            if self._selection_generation.is_current(generation):
                self.error = describe_error(e, "Failed to load permissions")
            return
        finally:
            if self._selection_generation.is_current(generation):
                self.access_loading = False

        if self._selection_generation.is_current(generation):
            self.access = access

    async def _load_operation_permissions(self, resource_id: str, generation: int) -> None:
        node = self.tree.find_node(resource_id)
        if node is None:
            return
        try:
            grants = await self.operation_service.list_operation_permissions(node)
        except Exception as e:
            logger.warning(f"Operation permissions unavailable for {resource_id}: {e}")
            return

        if self._selection_generation.is_current(generation):
            self.operation_permissions = grants

    # Resource grants

    async def _mutate(
        self,
        action: Callable[[str], Awaitable[T]],
        apply: Callable[[T], None],
        fallback: str,
    ) -> bool:
        resource_id = self.selected_id
        if resource_id is None:
            return False

        generation = self._selection_generation.current
        try:
            result = await action(resource_id)
        except Exception as e:
            logger.warning(f"{fallback} on {resource_id}: {e}")
            self.error = describe_error(e, fallback)
            return False

        if self._selection_generation.is_current(generation):
            apply(result)
        return True

    def _apply_access(self, access: ResourceAccess) -> None:
        self.access = access

    def _apply_operation_permissions(self, grants: List[OperationGrants]) -> None:
        self.operation_permissions = grants

    async def grant_user(self, user_address: str, level: PermissionLevel) -> bool:
        async def action(resource_id: str) -> ResourceAccess:
            target = GrantTarget.user(validate_address(user_address))
            return await self.permission_service.grant(resource_id, target, level)

        return await self._mutate(action, self._apply_access, "Failed to grant permission")

    async def revoke_user(self, user_address: str) -> bool:
        async def action(resource_id: str) -> ResourceAccess:
            target = GrantTarget.user(validate_address(user_address))
            return await self.permission_service.revoke(resource_id, target)

        return await self._mutate(action, self._apply_access, "Failed to revoke permission")

    async def grant_group(self, group_id: int, level: PermissionLevel) -> bool:
        async def action(resource_id: str) -> ResourceAccess:
            return await self.permission_service.grant(resource_id, GrantTarget.group(group_id), level)

        return await self._mutate(action, self._apply_access, "Failed to grant group permission")

    async def revoke_group(self, group_id: int) -> bool:
        async def action(resource_id: str) -> ResourceAccess:
            return await self.permission_service.revoke(resource_id, GrantTarget.group(group_id))

        return await self._mutate(action, self._apply_access, "Failed to revoke group permission")

    # Operation grants

    def _node_for(self, resource_id: str) -> ResourceNode:
        node = self.tree.find_node(resource_id)
        if node is None:
            raise LookupError(f"Resource {resource_id} is no longer in the tree")
        return node

    async def grant_operation_user(self, operation_name: str, user_address: str) -> bool:
        async def action(resource_id: str) -> List[OperationGrants]:
            target = GrantTarget.user(validate_address(user_address))
            return await self.operation_service.grant(self._node_for(resource_id), operation_name, target)

        return await self._mutate(
            action, self._apply_operation_permissions, "Failed to grant operation permission"
        )

    async def revoke_operation_user(self, operation_name: str, user_address: str) -> bool:
        async def action(resource_id: str) -> List[OperationGrants]:
            target = GrantTarget.user(validate_address(user_address))
            return await self.operation_service.revoke(self._node_for(resource_id), operation_name, target)

        return await self._mutate(
            action, self._apply_operation_permissions, "Failed to revoke operation permission"
        )

    async def grant_operation_group(self, operation_name: str, group_id: int) -> bool:
        async def action(resource_id: str) -> List[OperationGrants]:
            target = GrantTarget.group(group_id)
            return await self.operation_service.grant(self._node_for(resource_id), operation_name, target)

        return await self._mutate(
            action, self._apply_operation_permissions, "Failed to grant group operation permission"
        )

    async def revoke_operation_group(self, operation_name: str, group_id: int) -> bool:
        async def action(resource_id: str) -> List[OperationGrants]:
            target = GrantTarget.group(group_id)
            return await self.operation_service.revoke(self._node_for(resource_id), operation_name, target)

        return await self._mutate(
            action, self._apply_operation_permissions, "Failed to revoke group operation permission"
        )

    def clear_error(self) -> None:
        self.error = None
