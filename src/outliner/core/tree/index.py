"""Node lookups and the derived child -> parent index.

The model stores only forward links (``child_ids``). Parent lookups rebuild
the reverse map from scratch on every call and never cache it, so it cannot
drift from ``child_ids`` across mutations.
"""

from outliner.core.validation import check_index, check_model, check_node, check_node_array
from outliner.errors import NotFound
from outliner.models.node import ROOT_NODE_ID, Node, OutlineModel


def is_root_node(node: Node) -> bool:
    check_node(node)
    return node.id == ROOT_NODE_ID


def has_children(node: Node) -> bool:
    check_node(node)
    return len(node.child_ids) > 0


def can_expand(node: Node) -> bool:
    """True if the node has children that are currently hidden."""
    return has_children(node) and node.collapsed


def can_collapse(node: Node) -> bool:
    """True if the node has children that are currently shown."""
    return has_children(node) and not node.collapsed


def get_node_title(node: Node) -> str:
    check_node(node)
    return node.title


def get_node_by_id(node_id: str, model: OutlineModel) -> Node:
    """Return the node stored under ``node_id``; raise NotFound if absent."""
    check_model(model)
    node = model.by_id.get(node_id)
    if node is None:
        msg = f"Node {node_id!r} not found in model"
        raise NotFound(msg)
    return check_node(node)


def get_display_root_node(model: OutlineModel) -> Node:
    return get_node_by_id(ROOT_NODE_ID, model)


def get_current_node(model: OutlineModel) -> Node:
    return get_node_by_id(model.current_id, model)


def get_node_children(node: Node, model: OutlineModel) -> list[Node]:
    """Map ``node.child_ids`` to Node objects, in sibling order."""
    check_node(node)
    return check_node_array([get_node_by_id(cid, model) for cid in node.child_ids])


def get_visible_children(node: Node, model: OutlineModel) -> list[Node]:
    """Children as shown by a renderer: empty when the node is collapsed.

    This is a display filter only; cursor navigation ignores it.
    """
    if can_collapse(node):
        return get_node_children(node, model)
    return []


def build_parent_map(model: OutlineModel) -> dict[str, str]:
    """Build the full child id -> parent id mapping from ``child_ids``."""
    check_model(model)
    parents: dict[str, str] = {}
    for node in model.by_id.values():
        for child_id in node.child_ids:
            parents[child_id] = node.id
    return parents


def parent_id_of(node_id: str, model: OutlineModel) -> str | None:
    """Return the id of the node owning ``node_id``, or None for the root."""
    return build_parent_map(model).get(node_id)


def get_parent_of(node: Node, model: OutlineModel) -> Node:
    """Return the parent Node. The root has no parent: callers check
    ``is_root_node`` first.
    """
    check_node(node)
    parent_id = parent_id_of(node.id, model)
    if parent_id is None:
        msg = f"Node {node.id!r} has no parent"
        raise NotFound(msg)
    return get_node_by_id(parent_id, model)


def child_index(child_id: str, parent: Node) -> int:
    """Position of ``child_id`` within ``parent.child_ids``.

    A miss means the forward and derived backward links disagree.
    """
    check_node(parent)
    if child_id not in parent.child_ids:
        msg = f"Node {child_id!r} not found among children of {parent.id!r}"
        raise NotFound(msg)
    return check_index(parent.child_ids.index(child_id), parent.child_ids)
