"""Protocol interfaces for the groups feature."""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from .group import Group


@runtime_checkable
class GroupRepository(Protocol):
    """Protocol for group directory operations against the authority."""

    @abstractmethod
    async def list_groups(self) -> List[Group]:
        """List all groups."""
        ...

    @abstractmethod
    async def list_user_groups(self, user_address: str) -> List[Group]:
        """List the groups a user belongs to."""
        ...

    @abstractmethod
    async def create_group(self, name: str, description: Optional[str] = None) -> Group:
        """Create a new group."""
        ...

    @abstractmethod
    async def delete_group(self, group_id: int) -> bool:
        """Delete a group."""
        ...

    @abstractmethod
    async def add_member(self, user_address: str, group_id: int) -> bool:
        """Add a user to a group."""
        ...

    @abstractmethod
    async def remove_member(self, user_address: str, group_id: int) -> bool:
        """Remove a user from a group."""
        ...
