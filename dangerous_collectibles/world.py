"""Reference host world backed by the immutable ECS :class:`State`.

:class:`StateWorld` is the piece of host environment the trigger pipeline
needs: it answers radius queries over living agents, applies damage to their
health pools and records effect cues. It owns the *current* ``State`` and
advances it by swapping in new snapshots; the snapshots themselves are never
mutated.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from dangerous_collectibles.components import Position
from dangerous_collectibles.state import State
from dangerous_collectibles.types import Actor, DamageType, EntityID
from dangerous_collectibles.utils.ecs import agents_in_radius
from dangerous_collectibles.utils.health import apply_damage_and_check_death


logger = logging.getLogger(__name__)


class StateWorld:
    """Mutable holder of the current :class:`State`.

    Implements the ``SpatialQuery``, ``DamageSink`` and ``EffectPlayer``
    protocols from :mod:`dangerous_collectibles.types`.

    Attributes:
        state: Current snapshot.
        played_effects: Effect cues played so far, in order.
    """

    def __init__(self, state: State) -> None:
        self.state = state
        self.played_effects: List[Tuple[str, Position]] = []

    def actors_in_radius(self, position: Position, radius: float) -> List[EntityID]:
        return agents_in_radius(self.state, position, radius)

    def apply_damage(self, actor: Actor, amount: float, damage_type: DamageType) -> None:
        if actor not in self.state.health:
            return
        health, dead = apply_damage_and_check_death(
            self.state.health, self.state.dead, actor, amount
        )
        self.state = replace(self.state, health=health, dead=dead)
        logger.debug("%s took %s %s damage", actor, amount, damage_type)

    def play(self, effect: str, position: Position) -> None:
        self.played_effects.append((effect, position))
        logger.debug("Playing %s at %s", effect, position)

    def user_id_of(self, actor: Actor) -> Optional[str]:
        """Resolve an agent entity to its permission user id."""
        agent = self.state.agent.get(actor)
        return agent.user_id if agent is not None else None
