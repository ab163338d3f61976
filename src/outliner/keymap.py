"""Map key gestures to editor commands.

A keymap is an ordered list of ``(gesture, command)`` pairs. The first pair
whose gesture matches an input is dispatched; unmatched input is left alone.
Gestures are strings such as ``"enter"`` or ``"shift+tab"``.
"""

from collections.abc import Iterable

from loguru import logger

from outliner.editor import COMMAND_NAMES, OutlineEditor

_MODIFIERS = ("ctrl", "alt", "shift", "meta")

DEFAULT_KEYMAP: tuple[tuple[str, str], ...] = (
    ("enter", "add_line"),
    ("up", "move_prev"),
    ("down", "move_next"),
    ("tab", "indent"),
    ("shift+tab", "outdent"),
    ("left", "collapse"),
    ("right", "expand"),
)


def normalize_gesture(gesture: str) -> str:
    """Lower-case a gesture and put its modifiers in a fixed order.

    ``"Tab+Shift"`` and ``" shift + tab "`` both become ``"shift+tab"``.
    """
    parts = [p.strip().lower() for p in gesture.split("+") if p.strip()]
    if not parts:
        msg = f"Empty gesture: {gesture!r}"
        raise ValueError(msg)
    modifiers = [m for m in _MODIFIERS if m in parts]
    keys = [p for p in parts if p not in _MODIFIERS]
    if len(keys) != 1:
        msg = f"Gesture must name exactly one key: {gesture!r}"
        raise ValueError(msg)
    return "+".join([*modifiers, *keys])


class Keymap:
    """Ordered gesture -> command bindings."""

    def __init__(self, bindings: Iterable[tuple[str, str]] = DEFAULT_KEYMAP) -> None:
        self.bindings: list[tuple[str, str]] = []
        for gesture, command in bindings:
            if command not in COMMAND_NAMES:
                msg = f"Unknown command {command!r} bound to {gesture!r}"
                raise ValueError(msg)
            self.bindings.append((normalize_gesture(gesture), command))

    def lookup(self, gesture: str) -> str | None:
        """Return the command bound to ``gesture``, or None."""
        wanted = normalize_gesture(gesture)
        for bound, command in self.bindings:
            if bound == wanted:
                return command
        return None

    def dispatch(self, gesture: str, editor: OutlineEditor) -> str | None:
        """Run the command bound to ``gesture``.

        Returns the command name if the gesture was handled (and so should not
        get default handling), None otherwise.
        """
        command = self.lookup(gesture)
        if command is None:
            logger.debug("No binding for {!r}", gesture)
            return None
        editor.run(command)
        return command
