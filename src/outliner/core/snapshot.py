"""Serialize outline models to plain dicts and rebuild them from a cache.

Snapshots use the cache layout ``{"byId": {...}, "currentId": ...}`` with
nodes stored as ``{"id", "title", "collapsed", "childIds"}``.
"""

from typing import Any

from loguru import logger

from outliner.core.edit.mutations import create_initial_model
from outliner.core.validation import check_tree
from outliner.errors import OutlineError, ValidationError
from outliner.models.node import ROOT_NODE_ID, Node, OutlineModel

_MODEL_KEYS = {"byId", "currentId"}
_NODE_KEYS = {"id", "title", "collapsed", "childIds"}


def node_to_dict(node: Node) -> dict[str, Any]:
    return {
        "id": node.id,
        "title": node.title,
        "collapsed": node.collapsed,
        "childIds": list(node.child_ids),
    }


def to_snapshot(model: OutlineModel) -> dict[str, Any]:
    """Return a JSON-serializable copy of the model."""
    check_tree(model)
    return {
        "byId": {node_id: node_to_dict(node) for node_id, node in model.by_id.items()},
        "currentId": model.current_id,
    }


def merge_deep_right(left: Any, right: Any) -> Any:
    """Merge ``right`` over ``left``: dicts merge key by key, anything else
    from ``right`` replaces the value in ``left``.
    """
    if isinstance(left, dict) and isinstance(right, dict):
        merged = dict(left)
        for key, value in right.items():
            merged[key] = merge_deep_right(left[key], value) if key in left else value
        return merged
    return right


def _node_from_dict(key: str, data: Any) -> Node:
    if not isinstance(data, dict):
        msg = f"Node {key!r}: expected an object, got {type(data).__name__}"
        raise ValidationError(msg)
    missing = _NODE_KEYS - data.keys()
    if missing:
        msg = f"Node {key!r}: missing keys {sorted(missing)!r}"
        raise ValidationError(msg)
    extra = data.keys() - _NODE_KEYS
    if extra:
        logger.debug("Node {!r}: ignoring unknown keys {!r}", key, sorted(extra))
    return Node(
        id=data["id"],
        title=data["title"],
        collapsed=data["collapsed"],
        child_ids=data["childIds"],
    )


def parse_snapshot(data: Any) -> OutlineModel:
    """Build a model from an untrusted snapshot dict, checking every field."""
    if not isinstance(data, dict):
        msg = f"Snapshot must be an object, got {type(data).__name__}"
        raise ValidationError(msg)
    if data.keys() != _MODEL_KEYS:
        msg = f"Snapshot has bad keys {sorted(data.keys())!r}, expected {sorted(_MODEL_KEYS)!r}"
        raise ValidationError(msg)
    raw_nodes = data["byId"]
    if not isinstance(raw_nodes, dict):
        msg = f"Snapshot byId must be an object, got {type(raw_nodes).__name__}"
        raise ValidationError(msg)
    by_id = {key: _node_from_dict(key, raw) for key, raw in raw_nodes.items()}
    return check_tree(OutlineModel(by_id=by_id, current_id=data["currentId"]))


def from_snapshot(cached: Any) -> OutlineModel:
    """Rebuild a model from a cached snapshot, repairing what can be repaired.

    The cached value is merged over a fresh default model, so a missing root
    or cursor is filled in. A cursor pointing at a missing node goes back to
    the root. Anything still invalid after that falls back to the default.
    """
    if not cached:
        return create_initial_model()

    merged = merge_deep_right(to_snapshot(create_initial_model()), cached)
    if isinstance(merged, dict) and isinstance(merged.get("byId"), dict):
        current_id = merged.get("currentId")
        if not isinstance(current_id, str) or current_id not in merged["byId"]:
            logger.debug("Cached cursor {!r} is stale, moving it to the root", current_id)
            merged["currentId"] = ROOT_NODE_ID

    try:
        return parse_snapshot(merged)
    except OutlineError as e:
        logger.warning("Cached outline is invalid ({}), starting from an empty outline", e)
        return create_initial_model()
