"""Exceptions raised by the outline core."""


class OutlineError(Exception):
    """Base class for invariant breaches in the outline core."""


class ValidationError(OutlineError, ValueError):
    """A Node or OutlineModel value does not have the expected shape."""


class NotFound(OutlineError, LookupError):
    """An id expected in ``by_id`` or in a parent's ``child_ids`` is missing."""
