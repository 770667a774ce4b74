"""Tests for operation name sources and the operation permission service."""

import pytest

from auth_dashboard.config.constants import NodeKind
from auth_dashboard.core.exceptions import RefreshFailedError, SwitchboardUnavailableError, ValidationError
from auth_dashboard.features.permissions.entities import GrantTarget, OperationNameSource
from auth_dashboard.features.permissions.services import (
    DocumentSchemaSource,
    DriveOperationLogSource,
    OperationPermissionService,
    select_operation_name_source,
)
from auth_dashboard.features.resources.entities import ResourceNode


DRIVE = ResourceNode(id="d1", kind=NodeKind.DRIVE, name="Drive")
FOLDER = ResourceNode(id="f1", kind=NodeKind.FOLDER, name="Folder")
FILE = ResourceNode(id="doc", kind=NodeKind.FILE, name="Doc", document_type="powerhouse/budget")


class TestOperationNameSources:
    """Test operation-name discovery."""

    @pytest.mark.asyncio
    async def test_drive_log_is_deduplicated_and_sorted(self, mock_drive_repository):
        mock_drive_repository.list_operation_log.return_value = ["ADD_FILE", "ADD_FOLDER", "ADD_FILE", "DELETE_NODE"]
        source = DriveOperationLogSource(mock_drive_repository, page_size=50)

        names = await source.list_operation_names(DRIVE)

        assert names == ["ADD_FILE", "ADD_FOLDER", "DELETE_NODE"]
        mock_drive_repository.list_operation_log.assert_awaited_once_with("d1", 50)

    @pytest.mark.asyncio
    async def test_drive_log_default_page_size(self, mock_drive_repository):
        source = DriveOperationLogSource(mock_drive_repository)

        await source.list_operation_names(DRIVE)

        mock_drive_repository.list_operation_log.assert_awaited_once_with("d1", 200)

    @pytest.mark.asyncio
    async def test_document_schema_is_sorted(self, operation_store):
        operation_store.operation_names["doc"] = ["SET_NAME", "ADD_LINE"]
        source = DocumentSchemaSource(operation_store)

        assert await source.list_operation_names(FILE) == ["ADD_LINE", "SET_NAME"]

    def test_sources_satisfy_protocol(self, mock_drive_repository, operation_store):
        assert isinstance(DriveOperationLogSource(mock_drive_repository), OperationNameSource)
        assert isinstance(DocumentSchemaSource(operation_store), OperationNameSource)

    def test_source_selected_by_kind(self, mock_drive_repository, operation_store):
        drive_source = DriveOperationLogSource(mock_drive_repository)
        document_source = DocumentSchemaSource(operation_store)

        assert select_operation_name_source(DRIVE, drive_source, document_source) is drive_source
        assert select_operation_name_source(FOLDER, drive_source, document_source) is document_source
        assert select_operation_name_source(FILE, drive_source, document_source) is document_source


class TestOperationPermissionService:
    """Test concurrent listing and grant/revoke re-listing."""

    @pytest.fixture
    def service(self, mock_drive_repository, operation_store):
        operation_store.operation_names["doc"] = ["SET_NAME", "ADD_LINE", "REMOVE_LINE"]
        return OperationPermissionService(
            operation_repo=operation_store,
            drive_source=DriveOperationLogSource(mock_drive_repository),
            document_source=DocumentSchemaSource(operation_store),
        )

    @pytest.mark.asyncio
    async def test_lists_every_operation_in_name_order(self, service):
        grants = await service.list_operation_permissions(FILE)

        assert [g.operation_name for g in grants] == ["ADD_LINE", "REMOVE_LINE", "SET_NAME"]
        assert all(g.is_empty for g in grants)

    @pytest.mark.asyncio
    async def test_failing_operation_yields_empty_entry(self, service, operation_store):
        operation_store.grants[("doc", "SET_NAME")] = [GrantTarget.group(1)]
        operation_store.grants[("doc", "ADD_LINE")] = [GrantTarget.group(1)]
        operation_store.failing.add("ADD_LINE")

        grants = await service.list_operation_permissions(FILE)
        by_name = {g.operation_name: g for g in grants}

        assert by_name["ADD_LINE"].is_empty
        assert by_name["SET_NAME"].allows(GrantTarget.group(1))

    @pytest.mark.asyncio
    async def test_no_operations(self, service, mock_drive_repository):
        assert await service.list_operation_permissions(DRIVE) == []

    @pytest.mark.asyncio
    async def test_grant_then_revoke(self, service, other_address):
        target = GrantTarget.user(other_address)

        granted = await service.grant(FILE, "SET_NAME", target)
        revoked = await service.revoke(FILE, "SET_NAME", target)
        again = await service.revoke(FILE, "SET_NAME", target)

        assert {g.operation_name: g for g in granted}["SET_NAME"].allows(target)
        assert not {g.operation_name: g for g in revoked}["SET_NAME"].allows(target)
        assert [g.operation_name for g in again] == ["ADD_LINE", "REMOVE_LINE", "SET_NAME"]

    @pytest.mark.asyncio
    async def test_blank_operation_name_rejected(self, service):
        with pytest.raises(ValidationError):
            await service.grant(FILE, "  ", GrantTarget.group(1))

    @pytest.mark.asyncio
    async def test_failed_relist_after_applied_grant(self, service, operation_store):
        target = GrantTarget.group(1)

        async def unavailable(resource_id):
            raise SwitchboardUnavailableError("down")

        operation_store.list_document_operation_names = unavailable

        with pytest.raises(RefreshFailedError) as exc_info:
            await service.grant(FILE, "SET_NAME", target)

        assert operation_store.grants[("doc", "SET_NAME")] == [target]
        assert exc_info.value.message == "Operation permission updated, but reloading failed"
