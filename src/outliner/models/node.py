"""Domain models for the outline editor."""

from dataclasses import dataclass, field

ROOT_NODE_ID = "id_root"
ROOT_TITLE = "Root"


@dataclass
class Node:
    """A single titled node in the outline tree.

    Only forward links are stored: ``child_ids`` is the ordered list of
    children. Parents are derived on demand (see ``core.tree.index``).
    """

    id: str
    title: str
    collapsed: bool = False
    child_ids: list[str] = field(default_factory=list)


@dataclass
class OutlineModel:
    """The whole document: node storage plus the cursor."""

    by_id: dict[str, Node]
    current_id: str = ROOT_NODE_ID
