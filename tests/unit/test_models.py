"""Tests for domain models."""

from outliner.models.node import ROOT_NODE_ID, Node, OutlineModel


def test_node_defaults_to_expanded_leaf() -> None:
    node = Node(id="id_x", title="Smith")
    assert node.collapsed is False
    assert node.child_ids == []


def test_nodes_do_not_share_child_lists() -> None:
    first = Node(id="a", title="a")
    second = Node(id="b", title="b")
    first.child_ids.append("c")
    assert second.child_ids == []


def test_model_cursor_defaults_to_root() -> None:
    model = OutlineModel(by_id={ROOT_NODE_ID: Node(id=ROOT_NODE_ID, title="Root")})
    assert model.current_id == ROOT_NODE_ID
