"""Structural edits on an OutlineModel.

Each operation checks the tree before and after it runs. Structurally
ineligible requests (indenting a first child, outdenting a top-level node,
expanding a leaf) are no-ops and return False; a raised error always means
the model itself is broken.
"""

from collections.abc import Callable

from loguru import logger

from outliner.core.tree.index import (
    can_collapse,
    can_expand,
    child_index,
    get_current_node,
    get_node_by_id,
    get_parent_of,
    is_root_node,
)
from outliner.core.tree.navigation import prev_sibling_id
from outliner.core.validation import check_node, check_tree
from outliner.errors import ValidationError
from outliner.models.node import ROOT_NODE_ID, ROOT_TITLE, Node, OutlineModel


def create_root_node() -> Node:
    return check_node(Node(id=ROOT_NODE_ID, title=ROOT_TITLE))


def create_initial_model() -> OutlineModel:
    """A document holding only the root, with the cursor on it."""
    return check_tree(OutlineModel(by_id={ROOT_NODE_ID: create_root_node()}))


def create_new_node(id_generator: Callable[[], str], title_generator: Callable[[], str]) -> Node:
    """Create a fresh childless node with a generated id and placeholder title."""
    return check_node(Node(id=id_generator(), title=title_generator()))


def _register(new_node: Node, model: OutlineModel) -> None:
    check_node(new_node)
    if new_node.id in model.by_id:
        msg = f"Node id {new_node.id!r} already exists in model"
        raise ValidationError(msg)
    if new_node.child_ids:
        msg = f"New node {new_node.id!r} must not have children"
        raise ValidationError(msg)
    model.by_id[new_node.id] = new_node


def append_child(parent: Node, new_node: Node, model: OutlineModel) -> None:
    """Register ``new_node`` and make it the last child of ``parent``."""
    check_tree(model)
    parent = get_node_by_id(parent.id, model)
    _register(new_node, model)
    parent.child_ids.append(new_node.id)
    check_tree(model)


def insert_sibling_after(after_node: Node, new_node: Node, model: OutlineModel) -> None:
    """Register ``new_node`` and place it right after ``after_node``."""
    check_tree(model)
    parent = get_parent_of(after_node, model)
    idx = child_index(after_node.id, parent)
    _register(new_node, model)
    parent.child_ids.insert(idx + 1, new_node.id)
    check_tree(model)


def add_line(model: OutlineModel, new_node: Node) -> None:
    """Insert ``new_node`` below the cursor and move the cursor onto it.

    On the root the node becomes the root's last child, anywhere else it
    becomes the next sibling of the current node.
    """
    current = get_current_node(model)
    if is_root_node(current):
        append_child(current, new_node, model)
    else:
        insert_sibling_after(current, new_node, model)
    model.current_id = new_node.id
    check_tree(model)


def indent(model: OutlineModel) -> bool:
    """Make the current node the last child of its previous sibling."""
    check_tree(model)
    current = get_current_node(model)
    if is_root_node(current):
        return False
    sibling_id = prev_sibling_id(current, model)
    if sibling_id is None:
        logger.debug("indent: {} is a first child, nothing to do", current.id)
        return False

    old_parent = get_parent_of(current, model)
    new_parent = get_node_by_id(sibling_id, model)
    old_parent.child_ids.remove(current.id)
    new_parent.child_ids.append(current.id)
    new_parent.collapsed = False
    check_tree(model)
    return True


def outdent(model: OutlineModel) -> bool:
    """Move the current node up one level, right after its former parent."""
    check_tree(model)
    current = get_current_node(model)
    if is_root_node(current):
        return False
    parent = get_parent_of(current, model)
    if is_root_node(parent):
        logger.debug("outdent: {} is already top level, nothing to do", current.id)
        return False

    grandparent = get_parent_of(parent, model)
    parent.child_ids.remove(current.id)
    idx = child_index(parent.id, grandparent)
    grandparent.child_ids.insert(idx + 1, current.id)
    check_tree(model)
    return True


def expand(model: OutlineModel) -> bool:
    check_tree(model)
    current = get_current_node(model)
    if not can_expand(current):
        return False
    current.collapsed = False
    check_tree(model)
    return True


def collapse(model: OutlineModel) -> bool:
    check_tree(model)
    current = get_current_node(model)
    if not can_collapse(current):
        return False
    current.collapsed = True
    check_tree(model)
    return True


def set_title(model: OutlineModel, title: str) -> None:
    """Rename the current node."""
    check_tree(model)
    if not isinstance(title, str):
        msg = f"Title must be a string, got {type(title).__name__}"
        raise ValidationError(msg)
    get_current_node(model).title = title
    check_tree(model)


def move_cursor(model: OutlineModel, node_id: str) -> None:
    check_tree(model)
    model.current_id = get_node_by_id(node_id, model).id
    check_tree(model)
