"""Shape and invariant checks for nodes and outline models.

Every public operation in the core calls these at its boundaries. Each
checker returns its argument unchanged so calls can be chained, and raises
``ValidationError`` (bad shape, bad tree) or ``NotFound`` (dangling id).
"""

from collections.abc import Sequence
from typing import Any

from outliner.errors import NotFound, ValidationError
from outliner.models.node import ROOT_NODE_ID, Node, OutlineModel


def check_node(node: Any) -> Node:
    """Check that ``node`` is a well-formed Node."""
    if not isinstance(node, Node):
        msg = f"Expected Node, got {type(node).__name__}"
        raise ValidationError(msg)
    if not isinstance(node.id, str) or not node.id:
        msg = f"Node id must be a non-empty string, got {node.id!r}"
        raise ValidationError(msg)
    if not isinstance(node.title, str):
        msg = f"Node {node.id!r}: title must be a string, got {type(node.title).__name__}"
        raise ValidationError(msg)
    if not isinstance(node.collapsed, bool):
        msg = f"Node {node.id!r}: collapsed must be a bool, got {node.collapsed!r}"
        raise ValidationError(msg)
    if not isinstance(node.child_ids, list):
        msg = f"Node {node.id!r}: child_ids must be a list, got {type(node.child_ids).__name__}"
        raise ValidationError(msg)
    for child_id in node.child_ids:
        if not isinstance(child_id, str) or not child_id:
            msg = f"Node {node.id!r}: child ids must be non-empty strings, got {child_id!r}"
            raise ValidationError(msg)
    return node


def check_node_array(nodes: Any) -> list[Node]:
    """Check that ``nodes`` is a list of well-formed Nodes."""
    if not isinstance(nodes, list):
        msg = f"Expected a list of nodes, got {type(nodes).__name__}"
        raise ValidationError(msg)
    for node in nodes:
        check_node(node)
    return nodes


def check_model(model: Any) -> OutlineModel:
    """Check the shape of an OutlineModel (not its tree structure)."""
    if not isinstance(model, OutlineModel):
        msg = f"Expected OutlineModel, got {type(model).__name__}"
        raise ValidationError(msg)
    if not isinstance(model.by_id, dict) or not model.by_id:
        msg = "Model by_id must be a non-empty dict"
        raise ValidationError(msg)
    for key, node in model.by_id.items():
        check_node(node)
        if key != node.id:
            msg = f"Model by_id key {key!r} does not match node id {node.id!r}"
            raise ValidationError(msg)
    if not isinstance(model.current_id, str) or not model.current_id:
        msg = f"Model current_id must be a non-empty string, got {model.current_id!r}"
        raise ValidationError(msg)
    return model


def check_tree(model: OutlineModel) -> OutlineModel:
    """Check the tree invariants of a model.

    - the root exists and every referenced child id exists in ``by_id``
    - ``current_id`` names an existing node
    - ``child_ids`` form a tree rooted at the root: no cycles, every
      non-root node has exactly one parent, no unreachable nodes
    """
    check_model(model)
    if ROOT_NODE_ID not in model.by_id:
        msg = f"Root node {ROOT_NODE_ID!r} missing from model"
        raise NotFound(msg)
    if model.current_id not in model.by_id:
        msg = f"Current node {model.current_id!r} missing from model"
        raise NotFound(msg)

    seen: set[str] = set()
    todo = [ROOT_NODE_ID]
    while todo:
        node_id = todo.pop()
        if node_id in seen:
            msg = f"Node {node_id!r} is reachable twice (cycle or shared child)"
            raise ValidationError(msg)
        seen.add(node_id)
        for child_id in model.by_id[node_id].child_ids:
            if child_id not in model.by_id:
                msg = f"Node {node_id!r} references missing child {child_id!r}"
                raise NotFound(msg)
            todo.append(child_id)

    orphans = model.by_id.keys() - seen
    if orphans:
        msg = f"Nodes not reachable from root: {sorted(orphans)!r}"
        raise ValidationError(msg)
    return model


def check_index(idx: int, seq: Sequence[Any]) -> int:
    """Check that ``idx`` points into ``seq``; -1 means a failed lookup."""
    if not seq:
        msg = "Index lookup in an empty sequence"
        raise NotFound(msg)
    if not 0 <= idx < len(seq):
        msg = f"Index {idx} out of range for sequence of length {len(seq)}"
        raise NotFound(msg)
    return idx
