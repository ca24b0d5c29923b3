"""Immutable ECS `State` for the reference host world.

The trigger engine itself is host-agnostic; this module defines the frozen
snapshot used by :class:`dangerous_collectibles.world.StateWorld` to answer
spatial queries and record damage. Every change produces a new ``State``.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* Actors are entities with an ``Agent`` component; resource nodes carry a
    ``Collectible``. Both need a ``Position`` to take part in pickups and
    explosions.
* ``Dead`` is a marker written when health reaches zero.
"""

from dataclasses import dataclass
from pyrsistent import PMap, pmap

from dangerous_collectibles.components import (
    Agent,
    Collectible,
    Dead,
    Health,
    Position,
)
from dangerous_collectibles.types import EntityID


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Attributes:
        agent (PMap[EntityID, Agent]): Actors on the damageable layer.
        collectible (PMap[EntityID, Collectible]): Resource nodes that can be picked up.
        position (PMap[EntityID, Position]): World position of entities.
        health (PMap[EntityID, Health]): Health pools for damage application.
        dead (PMap[EntityID, Dead]): Marker for agents whose health reached zero.
        turn (int): Number of pickups processed.
    """

    agent: PMap[EntityID, Agent] = pmap()
    collectible: PMap[EntityID, Collectible] = pmap()
    position: PMap[EntityID, Position] = pmap()
    health: PMap[EntityID, Health] = pmap()
    dead: PMap[EntityID, Dead] = pmap()

    turn: int = 0

