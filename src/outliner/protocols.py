"""Protocols for the collaborators of the outline editor."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheProtocol(Protocol):
    """Protocol for snapshot caches used to persist the outline."""

    def save(self, snapshot: dict[str, Any]) -> None:
        """Store a serialized outline snapshot."""
        ...

    def try_read_json(self) -> Any | None:
        """Return the stored snapshot, or None if nothing was stored yet."""
        ...


@runtime_checkable
class IdGenerator(Protocol):
    """Produces a fresh unique node id on every call."""

    def __call__(self) -> str: ...


@runtime_checkable
class TitleGenerator(Protocol):
    """Produces a placeholder title for a new node."""

    def __call__(self) -> str: ...
