"""Keyboard-driven outline editor."""

from outliner.cache import SnapshotCache
from outliner.editor import COMMAND_NAMES, OutlineEditor, load_editor
from outliner.errors import NotFound, OutlineError, ValidationError
from outliner.keymap import DEFAULT_KEYMAP, Keymap
from outliner.models.node import ROOT_NODE_ID, Node, OutlineModel
from outliner.protocols import CacheProtocol, IdGenerator, TitleGenerator

__all__ = [
    "COMMAND_NAMES",
    "DEFAULT_KEYMAP",
    "ROOT_NODE_ID",
    "CacheProtocol",
    "IdGenerator",
    "Keymap",
    "Node",
    "NotFound",
    "OutlineEditor",
    "OutlineError",
    "OutlineModel",
    "SnapshotCache",
    "TitleGenerator",
    "ValidationError",
    "load_editor",
]
