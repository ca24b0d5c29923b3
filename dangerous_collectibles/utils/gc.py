"""Entity removal utilities.

A consumed collectible leaves the world for good, so every component stored
against its id is dropped. Other entities are untouched, including agents
that currently have no ``Position``.
"""

from dataclasses import replace
from typing import Any, Dict

from pyrsistent import pmap

from dangerous_collectibles.state import State
from dangerous_collectibles.types import EntityID


def remove_entity(state: State, eid: EntityID) -> State:
    """Return ``state`` with every component of ``eid`` removed."""
    new_fields: Dict[str, Any] = {}
    for field in state.__dataclass_fields__:
        value = getattr(state, field)
        if isinstance(value, type(pmap())) and eid in value:
            new_fields[field] = value.remove(eid)
    return replace(state, **new_fields)
