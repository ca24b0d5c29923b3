"""dangerous_collectibles.components
=================================

Aggregate import surface for the ECS component dataclasses used by the
reference host world, e.g.::

    from dangerous_collectibles.components import Position, Health, Collectible

Components are plain ``@dataclass`` value objects with no behavior; the
systems package and :class:`dangerous_collectibles.world.StateWorld` read and
replace them.
"""

from .properties import Agent
from .properties import Collectible
from .properties import Dead
from .properties import Health
from .properties import Position

__all__ = [
    "Agent",
    "Collectible",
    "Dead",
    "Health",
    "Position",
]
