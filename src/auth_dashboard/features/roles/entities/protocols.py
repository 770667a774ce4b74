"""Protocol interfaces for the roles feature."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from .role import RoleResolution


@runtime_checkable
class RoleRepository(Protocol):
    """Protocol for global role lookups."""

    @abstractmethod
    async def whoami(self, address: str) -> RoleResolution:
        """Resolve the role flags of ``address``."""
        ...
