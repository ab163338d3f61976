"""Default id and title generators for new nodes."""

import uuid

from faker import Faker

_faker = Faker()


def new_node_id() -> str:
    return f"id_{uuid.uuid4().hex}"


def new_node_title() -> str:
    """A random last name, used as the placeholder title of a new line."""
    return _faker.last_name()
