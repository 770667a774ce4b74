"""Tests for the groups and my-permissions controllers."""

from unittest.mock import AsyncMock

import pytest

from auth_dashboard.config.constants import GlobalRole, PermissionLevel
from auth_dashboard.core.exceptions import BusinessRejectionError, SwitchboardUnavailableError
from auth_dashboard.features.groups.entities import Group
from auth_dashboard.features.groups.services import GroupRegistry
from auth_dashboard.features.permissions.entities import GrantTarget
from auth_dashboard.features.permissions.services import PermissionService
from auth_dashboard.features.roles.entities import RoleResolution
from auth_dashboard.features.roles.services import RoleResolver
from auth_dashboard.features.sync.services import GroupsController, MyPermissionsController


class TestGroupsController:
    """Test group management actions."""

    @pytest.fixture
    def controller(self, mock_group_repository, sample_groups):
        mock_group_repository.list_groups.return_value = sample_groups
        return GroupsController(GroupRegistry(mock_group_repository))

    @pytest.mark.asyncio
    async def test_load(self, controller, sample_groups):
        await controller.load()

        assert controller.loading is False
        assert controller.groups == tuple(sample_groups)

    @pytest.mark.asyncio
    async def test_load_failure(self, controller, mock_group_repository):
        mock_group_repository.list_groups.side_effect = SwitchboardUnavailableError("down")

        await controller.load()

        assert controller.error == "Failed to load groups"
        assert controller.loading is False

    @pytest.mark.asyncio
    async def test_create_group(self, controller, mock_group_repository):
        mock_group_repository.create_group.return_value = Group(id=9, name="Ops")

        group = await controller.create_group(" Ops ", " On call ")

        assert group.id == 9
        mock_group_repository.create_group.assert_awaited_once_with("Ops", "On call")
        mock_group_repository.list_groups.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_group_without_name(self, controller, mock_group_repository):
        assert await controller.create_group("  ") is None

        assert controller.error == "Group name is required"
        mock_group_repository.create_group.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_delete_surfaces_message(self, controller, mock_group_repository):
        mock_group_repository.delete_group.side_effect = BusinessRejectionError("Group not found")

        assert await controller.delete_group(42) is False
        assert controller.error == "Group not found"

    @pytest.mark.asyncio
    async def test_delete_collapses_expanded_group(self, controller):
        controller.toggle_group(1)

        assert await controller.delete_group(1)
        assert controller.expanded_group is None

    @pytest.mark.asyncio
    async def test_membership(self, controller, mock_group_repository, other_address):
        assert await controller.add_member(1, f" {other_address} ")
        assert await controller.remove_member(1, other_address)

        mock_group_repository.add_member.assert_awaited_once_with(other_address, 1)
        assert mock_group_repository.list_groups.await_count == 2

    @pytest.mark.asyncio
    async def test_add_member_requires_address(self, controller):
        assert await controller.add_member(1, "") is False
        assert controller.error == "User address is required"

    def test_toggle_group(self, controller):
        controller.toggle_group(1)
        assert controller.expanded_group == 1
        controller.toggle_group(2)
        assert controller.expanded_group == 2
        controller.toggle_group(2)
        assert controller.expanded_group is None


class TestMyPermissionsController:
    """Test the caller's own permissions view."""

    @pytest.fixture
    def build(self, permission_store, mock_group_repository, mock_role_repository, user_address):
        def _build(is_admin=False):
            return MyPermissionsController(
                user_address=user_address,
                permission_service=PermissionService(permission_store),
                group_registry=GroupRegistry(mock_group_repository),
                role_resolver=RoleResolver(mock_role_repository),
                is_admin=is_admin,
            )

        return _build

    @pytest.mark.asyncio
    async def test_load(self, build, permission_store, mock_group_repository, mock_role_repository,
                        sample_groups, user_address):
        await permission_store.grant("doc", GrantTarget.user(user_address), PermissionLevel.WRITE)
        mock_group_repository.list_user_groups.return_value = sample_groups[:1]
        mock_role_repository.whoami.return_value = RoleResolution(is_user=True)
        controller = build()

        await controller.load()

        assert [p.resource_id for p in controller.permissions] == ["doc"]
        assert controller.groups == sample_groups[:1]
        assert controller.global_role == GlobalRole.USER
        assert controller.role_info["label"] == "User"
        assert controller.loading is False
        assert controller.error is None

    @pytest.mark.asyncio
    async def test_secondary_failures_are_silent(self, build, mock_group_repository, mock_role_repository):
        mock_group_repository.list_user_groups.side_effect = SwitchboardUnavailableError("down")
        mock_role_repository.whoami.side_effect = SwitchboardUnavailableError("down")
        controller = build()

        await controller.load()

        assert controller.groups == []
        assert controller.global_role == GlobalRole.GUEST
        assert controller.error is None

    @pytest.mark.asyncio
    async def test_role_failure_keeps_confirmed_admin(self, build, mock_role_repository):
        mock_role_repository.whoami.side_effect = SwitchboardUnavailableError("down")
        controller = build(is_admin=True)

        assert await controller.load_role() == GlobalRole.ADMIN

    @pytest.mark.asyncio
    async def test_permission_failure_is_surfaced(self, build):
        controller = build()
        controller.permission_service = AsyncMock()
        controller.permission_service.list_my_permissions.side_effect = SwitchboardUnavailableError("down")

        await controller.load_my_permissions()

        assert controller.error == "Failed to load permissions"
        assert controller.loading is False

    @pytest.mark.asyncio
    async def test_lookup_groups(self, build, mock_group_repository, sample_groups, other_address):
        mock_group_repository.list_user_groups.return_value = sample_groups[1:]
        controller = build()

        assert await controller.lookup_groups(f" {other_address} ")

        assert controller.lookup_address == other_address
        assert controller.groups == sample_groups[1:]
        mock_group_repository.list_user_groups.assert_awaited_once_with(other_address)

    @pytest.mark.asyncio
    async def test_lookup_groups_blank_is_ignored(self, build, mock_group_repository):
        controller = build()

        assert await controller.lookup_groups("   ") is False
        mock_group_repository.list_user_groups.assert_not_called()

    @pytest.mark.asyncio
    async def test_lookup_groups_error_is_surfaced(self, build, mock_group_repository):
        mock_group_repository.list_user_groups.side_effect = BusinessRejectionError("Unknown address")
        controller = build()

        assert await controller.lookup_groups("0xnobody") is False
        assert controller.error == "Unknown address"
