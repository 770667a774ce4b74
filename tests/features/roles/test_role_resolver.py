"""Tests for global role resolution."""

import pytest

from auth_dashboard.config.constants import GlobalRole
from auth_dashboard.core.exceptions import SwitchboardUnavailableError
from auth_dashboard.features.roles.entities import RoleResolution, role_info
from auth_dashboard.features.roles.repositories import SwitchboardRoleRepository
from auth_dashboard.features.roles.services import RoleResolver


class TestRoleResolution:
    """Test role flag interpretation."""

    @pytest.mark.parametrize("flags,expected", [
        ({"isAdmin": True, "isUser": True}, GlobalRole.ADMIN),
        ({"isUser": True}, GlobalRole.USER),
        ({"isGuest": True}, GlobalRole.GUEST),
        ({}, GlobalRole.GUEST),
    ])
    def test_global_role(self, flags, expected):
        assert RoleResolution.from_dict(flags).global_role == expected

    def test_role_info(self):
        assert role_info(GlobalRole.ADMIN)["label"] == "Admin"
        assert "Read-only" in role_info(GlobalRole.GUEST)["description"]


class TestRoleResolver:
    """Test lookups and degradation."""

    @pytest.fixture
    def resolver(self, mock_role_repository):
        return RoleResolver(mock_role_repository)

    @pytest.mark.asyncio
    async def test_resolve_role(self, resolver, mock_role_repository, user_address):
        mock_role_repository.whoami.return_value = RoleResolution(address=user_address, is_user=True)

        resolution = await resolver.resolve_role(user_address)

        assert resolution.is_user
        mock_role_repository.whoami.assert_awaited_once_with(user_address)

    @pytest.mark.asyncio
    async def test_failure_without_known_role_is_guest(self, resolver, mock_role_repository, user_address):
        mock_role_repository.whoami.side_effect = SwitchboardUnavailableError("down")

        assert await resolver.resolve_global_role(user_address) == GlobalRole.GUEST

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_role(self, resolver, mock_role_repository, user_address):
        mock_role_repository.whoami.side_effect = SwitchboardUnavailableError("down")

        role = await resolver.resolve_global_role(user_address, fallback=GlobalRole.USER)

        assert role == GlobalRole.USER

    @pytest.mark.asyncio
    async def test_success_ignores_fallback(self, resolver, mock_role_repository, user_address):
        mock_role_repository.whoami.return_value = RoleResolution(is_guest=True)

        role = await resolver.resolve_global_role(user_address, fallback=GlobalRole.ADMIN)

        assert role == GlobalRole.GUEST

    @pytest.mark.asyncio
    async def test_is_admin_failure_means_not_admin(self, resolver, mock_role_repository, user_address):
        mock_role_repository.whoami.side_effect = RuntimeError("boom")

        assert await resolver.is_admin(user_address) is False


class TestSwitchboardRoleRepository:
    """Test whoami mapping."""

    @pytest.mark.asyncio
    async def test_whoami(self, make_client, graphql_handler, user_address):
        requests = []
        handler = graphql_handler(
            {"whoami": {"address": user_address, "isAdmin": True, "isUser": True, "isGuest": False}},
            requests,
        )
        repository = SwitchboardRoleRepository(make_client(handler))

        resolution = await repository.whoami(user_address)

        assert resolution.is_admin
        assert resolution.global_role == GlobalRole.ADMIN
        assert requests[0]["body"]["variables"] == {"address": user_address}
