"""Resource node entities for the resources feature.

Drive records arrive from the switchboard as flat, parent-pointer node lists
(``DriveRecord``/``RawNode``) and are rebuilt into ``ResourceNode`` trees on
every refresh. Node identity is the ``id`` string only.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ....config.constants import NodeKind
from ....core.exceptions import ValidationError


@dataclass(frozen=True)
class RawNode:
    """A node as reported inside a drive's state, before tree construction."""

    id: Optional[str]
    name: Optional[str] = None
    kind: Optional[str] = None
    document_type: Optional[str] = None
    parent_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawNode":
        """Build from a switchboard node payload (camelCase keys).

        Non-scalar field values are treated as absent.
        """
        return cls(
            id=_scalar(data.get("id")),
            name=_scalar(data.get("name")),
            kind=_scalar(data.get("kind")),
            document_type=_scalar(data.get("documentType")),
            parent_id=_scalar(data.get("parentFolder")),
        )


def _scalar(value: Any) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return None
    return str(value) or None


@dataclass(frozen=True)
class DriveSummary:
    """Drive entry from the drive list."""

    id: str
    name: str


@dataclass
class DriveRecord:
    """A drive with its flat node list."""

    id: str
    name: Optional[str]
    nodes: List[RawNode] = field(default_factory=list)

    @classmethod
    def empty(cls, summary: DriveSummary) -> "DriveRecord":
        """Placeholder record for a drive whose detail could not be loaded."""
        return cls(id=summary.id, name=summary.name, nodes=[])


@dataclass
class ResourceNode:
    """A drive, folder or file in the resource tree."""

    id: str
    kind: NodeKind
    name: str
    parent_id: Optional[str] = None
    document_type: Optional[str] = None
    children: Optional[List["ResourceNode"]] = None

    def __post_init__(self):
        """Validate kind-specific fields."""
        if not self.id:
            raise ValidationError("Resource node id cannot be empty", field="id")

        if self.kind == NodeKind.FILE:
            if not self.document_type:
                raise ValidationError(f"File node {self.id} requires a document type", field="document_type")
            if self.children:
                raise ValidationError(f"File node {self.id} cannot have children", field="children")
            self.children = None
        else:
            if self.kind == NodeKind.DRIVE and self.parent_id is not None:
                raise ValidationError(f"Drive node {self.id} cannot have a parent", field="parent_id")
            if self.document_type is not None:
                raise ValidationError(f"Only file nodes carry a document type, got {self.kind.value}", field="document_type")
            if self.children is None:
                self.children = []

    @property
    def is_container(self) -> bool:
        """Check if this node can hold children (drive or folder)."""
        return self.kind in (NodeKind.DRIVE, NodeKind.FOLDER)

    @property
    def is_drive(self) -> bool:
        return self.kind == NodeKind.DRIVE

    @property
    def is_file(self) -> bool:
        return self.kind == NodeKind.FILE

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def short_document_type(self) -> Optional[str]:
        """Last path segment of the document type (``powerhouse/budget`` -> ``budget``)."""
        if not self.document_type:
            return None
        return self.document_type.split("/")[-1] if "/" in self.document_type else self.document_type

    def __repr__(self) -> str:
        child_info = f", children={len(self.children)}" if self.children is not None else ""
        return f"ResourceNode({self.kind.value}:{self.id}{child_info})"
