"""Tests for the switchboard group repository."""

import pytest

from auth_dashboard.core.exceptions import MissingCredentialsError
from auth_dashboard.features.groups.repositories import SwitchboardGroupRepository


GROUP_ROWS = [
    {"id": 1, "name": "Editors", "description": None, "members": ["0xa", "0xb"], "createdAt": None},
    {"id": None, "name": "broken"},
    {"id": 2, "name": "Reviewers", "description": "Review", "members": [], "createdAt": "2024-01-01T00:00:00Z"},
]


class TestSwitchboardGroupRepository:
    """Test payload mapping of group queries and mutations."""

    @pytest.fixture
    def requests(self):
        return []

    @pytest.fixture
    def repository(self, make_client, graphql_handler, requests):
        handler = graphql_handler({
            "userGroups": GROUP_ROWS[:1],
            "createGroup": {"id": 5, "name": "New", "description": "d", "members": []},
            "deleteGroup": True,
            "addUserToGroup": True,
            "removeUserFromGroup": False,
            "groups": GROUP_ROWS,
        }, requests)
        return SwitchboardGroupRepository(make_client(handler))

    @pytest.mark.asyncio
    async def test_list_groups(self, repository):
        groups = await repository.list_groups()

        assert [group.id for group in groups] == [1, 2]
        assert groups[0].members == ("0xa", "0xb")
        assert groups[1].created_at is not None

    @pytest.mark.asyncio
    async def test_list_user_groups(self, repository, requests):
        groups = await repository.list_user_groups("0xa")

        assert [group.name for group in groups] == ["Editors"]
        assert requests[0]["body"]["variables"] == {"userAddress": "0xa"}

    @pytest.mark.asyncio
    async def test_mutations(self, repository, requests):
        created = await repository.create_group("New", "d")
        deleted = await repository.delete_group(5)
        added = await repository.add_member("0xa", 5)
        removed = await repository.remove_member("0xa", 5)

        assert created.id == 5
        assert deleted is True
        assert added is True
        assert removed is False
        assert requests[0]["body"]["variables"] == {"name": "New", "description": "d"}
        assert requests[2]["body"]["variables"] == {"userAddress": "0xa", "groupId": 5}
        assert all(r["headers"]["authorization"] == "Bearer test-token" for r in requests)

    @pytest.mark.asyncio
    async def test_mutation_without_credentials_is_not_sent(
        self, make_client, graphql_handler, anonymous_session
    ):
        requests = []
        repository = SwitchboardGroupRepository(
            make_client(graphql_handler({"createGroup": {"id": 1, "name": "x"}}, requests), anonymous_session)
        )

        with pytest.raises(MissingCredentialsError):
            await repository.create_group("x")

        assert requests == []
