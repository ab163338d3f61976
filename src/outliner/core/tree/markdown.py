"""Render an outline as markdown or as a nested JSON-ready dict."""

import io
from typing import Any

from outliner.core.tree.index import can_expand, get_node_by_id, get_visible_children
from outliner.core.validation import check_tree
from outliner.models.node import ROOT_NODE_ID, Node, OutlineModel


def render_outline_as_markdown(
    model: OutlineModel,
    *,
    node_id: str = ROOT_NODE_ID,
    include_root: bool = True,
    mark_cursor: bool = True,
) -> str:
    """Render a node and its visible descendants as an indented bullet list.

    Args:
        model: The outline to render.
        node_id: The node to start rendering from.
        include_root: Whether to print the start node itself.
        mark_cursor: Whether to flag the current node with a trailing ``<``.

    Returns:
        Markdown string; collapsed nodes end with ``[+N]`` for N hidden children.
    """
    check_tree(model)
    out = io.StringIO()

    def _write(node: Node, depth: int) -> None:
        line = f"{'    ' * depth}- {node.title}"
        if can_expand(node):
            line += f" [+{len(node.child_ids)}]"
        if mark_cursor and node.id == model.current_id:
            line += "  <"
        out.write(line + "\n")
        for child in get_visible_children(node, model):
            _write(child, depth + 1)

    start = get_node_by_id(node_id, model)
    if include_root:
        _write(start, 0)
    else:
        for child in get_visible_children(start, model):
            _write(child, 0)
    return out.getvalue()


def render_outline_as_json(model: OutlineModel, *, node_id: str = ROOT_NODE_ID) -> dict[str, Any]:
    """Nested dict view of the outline.

    Collapsed nodes keep their ``child_count`` but carry no ``children`` key.
    """
    check_tree(model)

    def _build(node: Node) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "id": node.id,
            "title": node.title,
            "collapsed": node.collapsed,
            "child_count": len(node.child_ids),
        }
        if node.id == model.current_id:
            entry["current"] = True
        if not node.collapsed:
            entry["children"] = [_build(c) for c in get_visible_children(node, model)]
        return entry

    return _build(get_node_by_id(node_id, model))
