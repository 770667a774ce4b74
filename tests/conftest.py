"""Pytest configuration and fixtures for auth-dashboard tests."""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple
from unittest.mock import AsyncMock

import httpx
import pytest

from auth_dashboard.config.constants import LoginStatus, PermissionLevel
from auth_dashboard.config.settings import DashboardSettings
from auth_dashboard.core.shared import SessionContext
from auth_dashboard.features.groups.entities import Group
from auth_dashboard.features.permissions.entities import (
    GrantTarget,
    OperationGrants,
    OperationPermission,
    ResourceAccess,
    ResourcePermission,
)
from auth_dashboard.features.resources.entities import DriveRecord, DriveSummary, RawNode
from auth_dashboard.integrations.switchboard import StaticTokenProvider, SwitchboardClient


SWITCHBOARD_URL = "http://switchboard.test/graphql"
USER_ADDRESS = "0x1234567890abcdef1234567890abcdef12345678"
OTHER_ADDRESS = "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"


def _graphql_handler(
    responses: Dict[str, Any],
    requests: Optional[List[Dict[str, Any]]] = None
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport handler answering by the first matching field name.

    ``responses`` maps a GraphQL field name (e.g. ``"groups"``) to either a
    ``data`` value or a ready ``httpx.Response``. Each request body is
    appended to ``requests`` together with its headers.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else {}
        if requests is not None:
            requests.append({"body": body, "headers": dict(request.headers)})

        query = body.get("query", "")
        for field, value in responses.items():
            if field in query:
                if isinstance(value, httpx.Response):
                    return httpx.Response(value.status_code, headers=value.headers, content=value.content)
                return httpx.Response(200, json={"data": {field: value}})
        return httpx.Response(200, json={"errors": [{"message": f"Unhandled query: {query[:40]}"}]})

    return handler


class InMemoryPermissionStore:
    """In-memory authority for document grants.

    One grant per (resource, target); granting again replaces the level and
    revoking a missing grant returns False.
    """

    def __init__(self):
        self.grants: Dict[str, Dict[Tuple[str, Any], PermissionLevel]] = {}
        self.calls: List[str] = []

    @staticmethod
    def _key(target: GrantTarget) -> Tuple[str, Any]:
        if target.is_user:
            return ("user", target.user_address.lower())
        return ("group", target.group_id)

    async def get_resource_access(self, resource_id: str) -> ResourceAccess:
        self.calls.append(f"get:{resource_id}")
        entries = self.grants.get(resource_id, {})
        users = []
        groups = []
        for (kind, value), level in entries.items():
            target = GrantTarget.user(value) if kind == "user" else GrantTarget.group(value)
            grant = ResourcePermission(resource_id=resource_id, target=target, level=level)
            (users if kind == "user" else groups).append(grant)
        return ResourceAccess(resource_id=resource_id, user_grants=tuple(users), group_grants=tuple(groups))

    async def grant(self, resource_id: str, target: GrantTarget, level: PermissionLevel) -> None:
        self.calls.append(f"grant:{resource_id}")
        self.grants.setdefault(resource_id, {})[self._key(target)] = level

    async def revoke(self, resource_id: str, target: GrantTarget) -> bool:
        self.calls.append(f"revoke:{resource_id}")
        return self.grants.get(resource_id, {}).pop(self._key(target), None) is not None

    async def list_user_document_permissions(self, user_address: str) -> List[ResourcePermission]:
        result = []
        for resource_id, entries in self.grants.items():
            level = entries.get(("user", user_address.lower()))
            if level is not None:
                result.append(ResourcePermission(resource_id, GrantTarget.user(user_address), level))
        return result


class InMemoryOperationStore:
    """In-memory authority for operation grants."""

    def __init__(self, operation_names: Optional[Dict[str, List[str]]] = None):
        self.operation_names = operation_names or {}
        self.grants: Dict[Tuple[str, str], List[GrantTarget]] = {}
        self.failing: set = set()

    async def get_operation_permissions(self, resource_id: str, operation_name: str) -> OperationGrants:
        if operation_name in self.failing:
            raise RuntimeError(f"boom: {operation_name}")
        targets = self.grants.get((resource_id, operation_name), [])
        grants = [OperationPermission(resource_id, operation_name, target) for target in targets]
        return OperationGrants(
            resource_id=resource_id,
            operation_name=operation_name,
            user_grants=tuple(g for g in grants if g.target.is_user),
            group_grants=tuple(g for g in grants if g.target.is_group),
        )

    async def grant(self, resource_id: str, operation_name: str, target: GrantTarget) -> None:
        targets = self.grants.setdefault((resource_id, operation_name), [])
        if not any(existing.matches(target) for existing in targets):
            targets.append(target)

    async def revoke(self, resource_id: str, operation_name: str, target: GrantTarget) -> bool:
        targets = self.grants.get((resource_id, operation_name), [])
        for existing in targets:
            if existing.matches(target):
                targets.remove(existing)
                return True
        return False

    async def list_document_operation_names(self, resource_id: str) -> List[str]:
        return list(self.operation_names.get(resource_id, []))


@pytest.fixture
def graphql_handler():
    """Factory for field-name driven MockTransport handlers."""
    return _graphql_handler


@pytest.fixture
def user_address():
    return USER_ADDRESS


@pytest.fixture
def other_address():
    return OTHER_ADDRESS


@pytest.fixture
def settings():
    """Dashboard settings pointing at the test switchboard."""
    return DashboardSettings(switchboard_url=SWITCHBOARD_URL, _env_file=None)


@pytest.fixture
def session():
    """Logged-in session with a static bearer token."""
    return SessionContext(
        user_address=USER_ADDRESS,
        login_status=LoginStatus.AUTHORIZED,
        token_provider=StaticTokenProvider("test-token"),
    )


@pytest.fixture
def anonymous_session():
    """Session without identity or credentials."""
    return SessionContext()


@pytest.fixture
def make_client(session):
    """Factory for switchboard clients backed by an httpx MockTransport."""

    def _make(handler, client_session: Optional[SessionContext] = None) -> SwitchboardClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return SwitchboardClient(
            url=SWITCHBOARD_URL,
            session=client_session or session,
            http_client=http_client,
        )

    return _make


@pytest.fixture
def permission_store():
    return InMemoryPermissionStore()


@pytest.fixture
def operation_store():
    return InMemoryOperationStore()


@pytest.fixture
def mock_drive_repository():
    """Mock drive repository for testing."""
    repo = AsyncMock()
    repo.list_drives = AsyncMock(return_value=[])
    repo.get_drive_detail = AsyncMock()
    repo.list_operation_log = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_group_repository():
    """Mock group repository for testing."""
    repo = AsyncMock()
    repo.list_groups = AsyncMock(return_value=[])
    repo.list_user_groups = AsyncMock(return_value=[])
    repo.create_group = AsyncMock()
    repo.delete_group = AsyncMock(return_value=True)
    repo.add_member = AsyncMock(return_value=True)
    repo.remove_member = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def mock_role_repository():
    """Mock role repository for testing."""
    repo = AsyncMock()
    repo.whoami = AsyncMock()
    return repo


@pytest.fixture
def sample_groups():
    """Two groups, the first containing the test user."""
    return [
        Group(id=1, name="Editors", members=(USER_ADDRESS,)),
        Group(id=2, name="Reviewers", description="Review team", members=(OTHER_ADDRESS,)),
    ]


@pytest.fixture
def sample_drive_record():
    """Drive d1 holding folder f1 with one file, plus a root-level file."""
    return DriveRecord(
        id="d1",
        name="Drive One",
        nodes=[
            RawNode(id="f1", name="Folder", kind="folder"),
            RawNode(id="a", name="Budget", kind="file", document_type="powerhouse/budget", parent_id="f1"),
            RawNode(id="b", name="Notes", kind="file", document_type="powerhouse/notes"),
        ],
    )


@pytest.fixture
def sample_drive_summary():
    return DriveSummary(id="d1", name="Drive One")
