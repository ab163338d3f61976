"""Pre-order cursor movement over the outline tree.

Movement walks the full tree structure. The ``collapsed`` flag is not
consulted here, so the cursor may enter children a renderer hides.
"""

from outliner.core.tree.index import child_index, get_node_by_id, get_parent_of, is_root_node
from outliner.core.validation import check_node
from outliner.models.node import Node, OutlineModel


def first_child_id(node: Node) -> str | None:
    check_node(node)
    return node.child_ids[0] if node.child_ids else None


def next_sibling_id(node: Node, model: OutlineModel) -> str | None:
    """Id of the sibling after ``node``, or None if last or root."""
    if is_root_node(node):
        return None
    parent = get_parent_of(node, model)
    idx = child_index(node.id, parent)
    if idx < len(parent.child_ids) - 1:
        return parent.child_ids[idx + 1]
    return None


def prev_sibling_id(node: Node, model: OutlineModel) -> str | None:
    """Id of the sibling before ``node``, or None if first or root."""
    if is_root_node(node):
        return None
    parent = get_parent_of(node, model)
    idx = child_index(node.id, parent)
    if idx > 0:
        return parent.child_ids[idx - 1]
    return None


def next_sibling_of_nearest_ancestor(node: Node, model: OutlineModel) -> str | None:
    """Walk up from ``node`` to the first ancestor with a next sibling.

    Returns that sibling's id, or None once the root is reached.
    """
    while not is_root_node(node):
        parent = get_parent_of(node, model)
        sibling_id = next_sibling_id(parent, model)
        if sibling_id is not None:
            return sibling_id
        node = parent
    return None


def last_descendant_or_self(node_id: str, model: OutlineModel) -> str:
    """Follow last children down to a leaf. Relies on the tree being acyclic."""
    node = get_node_by_id(node_id, model)
    while node.child_ids:
        node = get_node_by_id(node.child_ids[-1], model)
    return node.id


def next_node_id(node: Node, model: OutlineModel) -> str | None:
    """The node after ``node`` in pre-order, or None at the end of the document."""
    candidate = first_child_id(node)
    if candidate is None:
        candidate = next_sibling_id(node, model)
    if candidate is None:
        candidate = next_sibling_of_nearest_ancestor(node, model)
    return candidate


def prev_node_id(node: Node, model: OutlineModel) -> str | None:
    """The node before ``node`` in pre-order, or None for the root."""
    if is_root_node(node):
        return None
    sibling_id = prev_sibling_id(node, model)
    if sibling_id is not None:
        return last_descendant_or_self(sibling_id, model)
    return get_parent_of(node, model).id
