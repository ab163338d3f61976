"""Cursor controller: the named commands a key binding can trigger.

Every command is atomic. It runs against a deep copy of the model, the copy
is checked, and only then are its fields swapped into the live model.
Listeners are notified once per command with the resulting model.
"""

import copy
from collections.abc import Callable

from loguru import logger

from outliner.core.edit import mutations
from outliner.core.snapshot import from_snapshot, to_snapshot
from outliner.core.tree.index import get_current_node
from outliner.core.tree.navigation import next_node_id, prev_node_id
from outliner.core.validation import check_tree
from outliner.errors import OutlineError
from outliner.generators import new_node_id, new_node_title
from outliner.models.node import Node, OutlineModel
from outliner.protocols import CacheProtocol, IdGenerator, TitleGenerator

Listener = Callable[[OutlineModel], None]

COMMAND_NAMES: tuple[str, ...] = (
    "add_line",
    "move_prev",
    "move_next",
    "indent",
    "outdent",
    "expand",
    "collapse",
)


def _move_next(model: OutlineModel) -> None:
    target = next_node_id(get_current_node(model), model)
    if target is not None:
        mutations.move_cursor(model, target)


def _move_prev(model: OutlineModel) -> None:
    target = prev_node_id(get_current_node(model), model)
    if target is not None:
        mutations.move_cursor(model, target)


class OutlineEditor:
    """Binds traversal and mutations to a single shared OutlineModel."""

    def __init__(
        self,
        model: OutlineModel | None = None,
        *,
        id_generator: IdGenerator = new_node_id,
        title_generator: TitleGenerator = new_node_title,
    ) -> None:
        self.model = check_tree(model) if model is not None else mutations.create_initial_model()
        self._id_generator = id_generator
        self._title_generator = title_generator
        self._listeners: list[Listener] = []

    @property
    def current_node(self) -> Node:
        return get_current_node(self.model)

    def subscribe(self, listener: Listener) -> Listener:
        """Call ``listener`` with the model after every command."""
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def run(self, name: str) -> None:
        """Run a command by name (see COMMAND_NAMES)."""
        if name not in COMMAND_NAMES:
            msg = f"Unknown command {name!r}, expected one of {COMMAND_NAMES!r}"
            raise ValueError(msg)
        getattr(self, name)()

    def add_line(self) -> None:
        new_node = mutations.create_new_node(self._id_generator, self._title_generator)
        self._apply("add_line", lambda model: mutations.add_line(model, new_node))

    def move_next(self) -> None:
        self._apply("move_next", _move_next)

    def move_prev(self) -> None:
        self._apply("move_prev", _move_prev)

    def indent(self) -> None:
        self._apply("indent", mutations.indent)

    def outdent(self) -> None:
        self._apply("outdent", mutations.outdent)

    def expand(self) -> None:
        self._apply("expand", mutations.expand)

    def collapse(self) -> None:
        self._apply("collapse", mutations.collapse)

    def set_title(self, title: str) -> None:
        self._apply("set_title", lambda model: mutations.set_title(model, title))

    def _apply(self, name: str, edit: Callable[[OutlineModel], object]) -> None:
        draft = copy.deepcopy(self.model)
        try:
            edit(draft)
            check_tree(draft)
        except OutlineError:
            logger.exception("Command {} hit a broken outline, model left unchanged", name)
            raise

        self.model.by_id = draft.by_id
        self.model.current_id = draft.current_id
        logger.debug("{}: cursor on {}", name, self.model.current_id)
        for listener in list(self._listeners):
            listener(self.model)


def load_editor(
    cache: CacheProtocol,
    *,
    id_generator: IdGenerator = new_node_id,
    title_generator: TitleGenerator = new_node_title,
) -> OutlineEditor:
    """Create an editor from the cached snapshot and keep the cache up to date.

    An unreadable cache (bad JSON, a stored null) is logged and replaced by an
    empty outline on the next save.
    """
    try:
        cached = cache.try_read_json()
    except ValueError as e:
        logger.warning("Cannot read cached outline ({}), starting from an empty outline", e)
        cached = None
    editor = OutlineEditor(
        from_snapshot(cached),
        id_generator=id_generator,
        title_generator=title_generator,
    )
    attach_cache(editor, cache)
    return editor


def attach_cache(editor: OutlineEditor, cache: CacheProtocol) -> Listener:
    """Persist a snapshot to ``cache`` after every command."""

    def _save(model: OutlineModel) -> None:
        cache.save(to_snapshot(model))

    return editor.subscribe(_save)
