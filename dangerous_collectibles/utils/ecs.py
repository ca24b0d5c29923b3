"""ECS convenience queries.

Helper functions for querying entity/component relationships without
introducing iteration logic into systems. All functions are pure and operate
on the immutable :class:`dangerous_collectibles.state.State` snapshot.
"""

from typing import List, Mapping

from dangerous_collectibles.components import Position
from dangerous_collectibles.state import State
from dangerous_collectibles.types import EntityID
from dangerous_collectibles.utils.spatial import entities_within_radius


def living_agents(state: State) -> List[EntityID]:
    """Return IDs of agents that are positioned and not dead."""
    return [
        eid
        for eid in state.agent
        if eid in state.position and eid not in state.dead
    ]


def agents_in_radius(state: State, center: Position, radius: float) -> List[EntityID]:
    """Return living agents within ``radius`` of ``center``."""
    store: Mapping[EntityID, Position] = {
        eid: state.position[eid] for eid in living_agents(state)
    }
    return entities_within_radius(store, center, radius)

