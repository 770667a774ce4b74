"""Immutable snapshot of the resource forest with id lookups."""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .resource_node import ResourceNode


class ResourceTree:
    """A forest of drive nodes plus an index of every node by id.

    Instances are never patched; a refresh builds a new tree and replaces
    the old one wholesale.
    """

    def __init__(self, drives: Sequence[ResourceNode] = ()):
        self._drives: Tuple[ResourceNode, ...] = tuple(drives)
        self._index: Dict[str, ResourceNode] = {}
        self._drive_of: Dict[str, str] = {}

        for drive in self._drives:
            for node in _walk(drive):
                # First occurrence wins when ids collide
                self._index.setdefault(node.id, node)
                self._drive_of.setdefault(node.id, drive.id)

    @property
    def drives(self) -> Tuple[ResourceNode, ...]:
        return self._drives

    @property
    def drive_ids(self) -> List[str]:
        return [drive.id for drive in self._drives]

    def __len__(self) -> int:
        return len(self._drives)

    def __iter__(self) -> Iterator[ResourceNode]:
        return iter(self._drives)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def iter_nodes(self) -> Iterator[ResourceNode]:
        """Yield every node, depth-first, drives included."""
        for drive in self._drives:
            yield from _walk(drive)

    def find_node(self, node_id: str) -> Optional[ResourceNode]:
        return self._index.get(node_id)

    def find_drive_id(self, node_id: str) -> Optional[str]:
        """Find the id of the drive containing ``node_id`` (a drive contains itself)."""
        return self._drive_of.get(node_id)

    def is_drive(self, node_id: str) -> bool:
        return any(drive.id == node_id for drive in self._drives)

    def node_label(self, node_id: str) -> str:
        """Display name of a node, or a shortened id when it is unknown."""
        node = self.find_node(node_id)
        if node is not None:
            return node.name
        return node_id[:8] + "..."


def _walk(node: ResourceNode) -> Iterator[ResourceNode]:
    yield node
    for child in node.children or ():
        yield from _walk(child)
