"""Radius queries over position stores.

Distances are computed in one vectorized pass with numpy rather than per
entity, since explosions query every actor in the world.
"""

from typing import List, Mapping

import numpy as np

from dangerous_collectibles.components import Position
from dangerous_collectibles.types import EntityID


def position_to_array(position: Position) -> np.ndarray:
    """Return ``position`` as a float vector ``[x, y, z]``."""
    return np.array([position.x, position.y, position.z], dtype=float)


def entities_within_radius(
    position_store: Mapping[EntityID, Position], center: Position, radius: float
) -> List[EntityID]:
    """Return IDs whose position lies within ``radius`` of ``center`` (inclusive)."""
    if not position_store:
        return []
    eids = list(position_store.keys())
    coords = np.array(
        [[p.x, p.y, p.z] for p in position_store.values()], dtype=float
    )
    dists = np.linalg.norm(coords - position_to_array(center), axis=1)
    return [eid for eid, d in zip(eids, dists) if d <= radius]
