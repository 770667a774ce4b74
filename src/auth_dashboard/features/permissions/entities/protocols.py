"""Protocol interfaces for permission feature dependency injection.

Defines contracts for resource-level grants, operation-level grants and
operation-name discovery.
"""

from abc import abstractmethod
from typing import List, Protocol, runtime_checkable

from ....config.constants import PermissionLevel
from ...resources.entities import ResourceNode
from .grant import GrantTarget, OperationGrants, ResourceAccess, ResourcePermission


@runtime_checkable
class PermissionRepository(Protocol):
    """Protocol for per-resource grant operations."""

    @abstractmethod
    async def get_resource_access(self, resource_id: str) -> ResourceAccess:
        """Get user and group grants of a resource."""
        ...

    @abstractmethod
    async def grant(self, resource_id: str, target: GrantTarget, level: PermissionLevel) -> None:
        """Grant ``level`` to ``target``, replacing any existing grant."""
        ...

    @abstractmethod
    async def revoke(self, resource_id: str, target: GrantTarget) -> bool:
        """Revoke the grant of ``target``; False when there was none."""
        ...

    @abstractmethod
    async def list_user_document_permissions(self, user_address: str) -> List[ResourcePermission]:
        """List the document grants held by the signed-in caller ``user_address``."""
        ...


@runtime_checkable
class OperationPermissionRepository(Protocol):
    """Protocol for per-operation grant operations."""

    @abstractmethod
    async def get_operation_permissions(self, resource_id: str, operation_name: str) -> OperationGrants:
        """Get user and group grants for one operation on a resource."""
        ...

    @abstractmethod
    async def grant(self, resource_id: str, operation_name: str, target: GrantTarget) -> None:
        """Allow ``target`` to invoke ``operation_name`` on a resource."""
        ...

    @abstractmethod
    async def revoke(self, resource_id: str, operation_name: str, target: GrantTarget) -> bool:
        """Withdraw the operation grant of ``target``; False when there was none."""
        ...

    @abstractmethod
    async def list_document_operation_names(self, resource_id: str) -> List[str]:
        """Operation names declared by the resource's document type."""
        ...


@runtime_checkable
class OperationNameSource(Protocol):
    """Protocol for discovering the operation names of a resource."""

    @abstractmethod
    async def list_operation_names(self, node: ResourceNode) -> List[str]:
        """Sorted, duplicate-free operation names for ``node``."""
        ...
