"""Shared test fixtures."""

import pytest

from outliner.editor import OutlineEditor
from outliner.models.node import ROOT_NODE_ID, Node, OutlineModel
from tests.unit.fakes import FixedTitle, SequentialIds


def make_model(children: dict[str, list[str]], *, current_id: str = ROOT_NODE_ID) -> OutlineModel:
    """Build a model from an adjacency dict; titles equal ids.

    Every id mentioned anywhere gets a node. Ids ending in '!' are collapsed
    (the '!' is stripped).
    """
    ids: list[str] = [ROOT_NODE_ID]
    for parent, kids in children.items():
        ids.extend([parent, *kids])

    by_id: dict[str, Node] = {}
    for raw in ids:
        node_id = raw.rstrip("!")
        if node_id not in by_id:
            by_id[node_id] = Node(id=node_id, title=node_id)
        if raw.endswith("!"):
            by_id[node_id].collapsed = True
    for parent, kids in children.items():
        by_id[parent.rstrip("!")].child_ids = [k.rstrip("!") for k in kids]
    return OutlineModel(by_id=by_id, current_id=current_id)


@pytest.fixture
def sample_model() -> OutlineModel:
    """Root
    - a
        - a1
        - a2
            - a2x
    - b
    - c
        - c1
    """
    return make_model(
        {
            ROOT_NODE_ID: ["a", "b", "c"],
            "a": ["a1", "a2"],
            "a2": ["a2x"],
            "c": ["c1"],
        }
    )


@pytest.fixture
def editor() -> OutlineEditor:
    """An empty outline whose new lines get ids A, B, C, ..."""
    return OutlineEditor(
        id_generator=SequentialIds("A", "B", "C", "D", "E", "F"),
        title_generator=FixedTitle(),
    )
