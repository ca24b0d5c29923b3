"""Trigger engine.

Decides what happens when an actor collects a resource node. The decision
order is fixed:

1. Malformed events (missing kind, position or actor) are ignored.
2. Exempt actors are ignored before any group lookup or random draw.
3. The first configured group containing the collectible's kind is looked
    up; no match means the pickup is ignored.
4. One integer is drawn from ``[0, 100)``; the trigger fires iff the draw is
    strictly below the group's ``chance``.
5. On success the area-effect applicator detonates at the pickup position
    and the group's removal policy decides the :class:`Disposition`.

The random source and exemption provider are injected so the engine holds no
ambient state. The registry is an immutable snapshot replaced as a whole by
:meth:`TriggerEngine.reload`.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from dangerous_collectibles.components import Position
from dangerous_collectibles.registry import Registry
from dangerous_collectibles.systems.explosion import AreaEffectApplicator
from dangerous_collectibles.types import (
    Actor,
    Disposition,
    ExemptionProvider,
    RandomSource,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickupEvent:
    """A single collectible pickup reported by the host.

    Attributes:
        kind: Short prefab name of the collected entity.
        position: World position of the collected entity.
        actor: Actor performing the pickup.
    """

    kind: Optional[str]
    position: Optional[Position]
    actor: Optional[Actor]


def chance_succeeded(random_source: RandomSource, chance: int) -> bool:
    """Draw once from ``[0, 100)`` and report whether it falls below ``chance``."""
    return random_source.randrange(0, 100) < chance


class TriggerEngine:
    def __init__(
        self,
        registry: Registry,
        applicator: AreaEffectApplicator,
        exemption: ExemptionProvider,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self._registry = registry
        self.applicator = applicator
        self.exemption = exemption
        self.random_source: RandomSource = (
            random_source if random_source is not None else random.Random()
        )

    @property
    def registry(self) -> Registry:
        return self._registry

    def reload(self, registry: Registry) -> None:
        """Replace the active registry in a single assignment."""
        self._registry = registry
        logger.info("Registry reloaded with %d groups", len(registry))

    def on_pickup(self, event: PickupEvent) -> Disposition:
        """Evaluate a pickup and return whether the host should remove the entity."""
        if event.actor is None or event.kind is None or event.position is None:
            return Disposition.IGNORE

        try:
            exempt = self.exemption.is_exempt(event.actor)
        except Exception:
            logger.exception("Exemption check failed for %r", event.actor)
            return Disposition.IGNORE
        if exempt:
            return Disposition.IGNORE

        group = self._registry.find_group(event.kind)
        if group is None:
            return Disposition.IGNORE

        if not chance_succeeded(self.random_source, group.explosion.chance):
            return Disposition.IGNORE

        logger.debug("%r triggered an explosion picking up %s", event.actor, event.kind)
        self.applicator.apply(event.position, group.explosion)

        if group.remove_on_explosion:
            return Disposition.CONSUME
        return Disposition.IGNORE
