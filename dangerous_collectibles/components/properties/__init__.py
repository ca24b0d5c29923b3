"""Property component aggregates.

Re-exports the components a host world is made of: actors (:class:`Agent`
with :class:`Health`), resource nodes (:class:`Collectible`), their shared
:class:`Position`, and the :class:`Dead` marker written by damage
application. All are immutable dataclasses; state changes are expressed by
replacing entries in the ``State`` component maps.
"""

from .agent import Agent
from .collectible import Collectible
from .dead import Dead
from .health import Health
from .position import Position

__all__ = [
    "Agent",
    "Collectible",
    "Dead",
    "Health",
    "Position",
]
