"""Resource tree construction.

Turns each drive's flat, parent-pointer node list into a tree of
``ResourceNode`` objects:

1. every folder is indexed by id with an empty child list;
2. a single pass over the nodes in input order attaches each node to its
   parent folder, or to the drive root when the parent does not resolve.

Children keep the input order. Malformed nodes are dropped without
aborting the drive.
"""

import logging
from typing import Dict, List, Optional, Sequence, Set

from ....config.constants import NodeKind, NodePlaceholders
from ..entities import DriveRecord, RawNode, ResourceNode


logger = logging.getLogger(__name__)


def build_tree(drives: Sequence[DriveRecord]) -> List[ResourceNode]:
    """Build one drive node per record, in input order."""
    return [build_drive(record) for record in drives]


def build_drive(record: DriveRecord) -> ResourceNode:
    """Build the tree of a single drive."""
    folders = _index_folders(record.nodes)
    detached = _cyclic_folder_ids(folders)

    root_children: List[ResourceNode] = []
    placed: Set[str] = set()
    dropped = 0

    for raw in record.nodes:
        if not raw.id:
            dropped += 1
            continue

        if raw.kind == NodeKind.FOLDER.value:
            if raw.id in placed:
                dropped += 1
                continue
            node = folders[raw.id]
            placed.add(raw.id)
            parent = None if raw.id in detached else _resolve_parent(folders, node.parent_id)
        else:
            node = _build_file(raw)
            if node is None:
                dropped += 1
                continue
            parent = _resolve_parent(folders, node.parent_id)

        if parent is not None:
            parent.children.append(node)
        else:
            root_children.append(node)

    if dropped:
        logger.debug(f"Dropped {dropped} malformed node(s) while building drive {record.id}")

    return ResourceNode(
        id=record.id,
        kind=NodeKind.DRIVE,
        name=record.name or NodePlaceholders.DRIVE,
        children=root_children,
    )


def _index_folders(nodes: Sequence[RawNode]) -> Dict[str, ResourceNode]:
    folders: Dict[str, ResourceNode] = {}
    for raw in nodes:
        if not raw.id or raw.kind != NodeKind.FOLDER.value or raw.id in folders:
            continue
        folders[raw.id] = ResourceNode(
            id=raw.id,
            kind=NodeKind.FOLDER,
            name=raw.name or NodePlaceholders.FOLDER,
            parent_id=raw.parent_id,
        )
    return folders


def _build_file(raw: RawNode) -> Optional[ResourceNode]:
    # Anything that is not a folder needs a document type to be a file
    if not raw.document_type:
        return None
    return ResourceNode(
        id=raw.id,
        kind=NodeKind.FILE,
        name=raw.name or NodePlaceholders.FILE,
        parent_id=raw.parent_id,
        document_type=raw.document_type,
    )


def _resolve_parent(folders: Dict[str, ResourceNode], parent_id: Optional[str]) -> Optional[ResourceNode]:
    if not parent_id:
        return None
    return folders.get(parent_id)


def _cyclic_folder_ids(folders: Dict[str, ResourceNode]) -> Set[str]:
    """Ids of folders whose parent chain loops back to themselves.

    Such folders go to the drive root so every node stays reachable.
    """
    cyclic: Set[str] = set()
    for folder_id in folders:
        seen: Set[str] = set()
        current: Optional[str] = folder_id
        while current is not None and current in folders and current not in seen:
            seen.add(current)
            current = folders[current].parent_id
        if current == folder_id:
            cyclic.add(folder_id)
    return cyclic
