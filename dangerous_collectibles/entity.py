"""Entity ID allocation.

Each *thing* in the host world is an ``EntityID`` (an integer) plus the
component dataclasses stored against it on :class:`State`.

>>> from dangerous_collectibles.entity import new_entity_id
>>> player_id = new_entity_id()

IDs come from a process-local counter and are never recycled.
"""

from itertools import count

from dangerous_collectibles.types import EntityID


_entity_ids = count()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_ids)
