"""Explosion (area-effect) system.

Applies one detonation at a world position:

1. Play every explosion cue at the position (fire-and-forget).
2. Ask the spatial query for actors on the damageable layer within the
    profile's ``impact_radius``.
3. Skip exempt actors; deliver a single ``DamageType.EXPLOSION`` hit of
    ``damage_amount`` to each remaining actor.

Collaborator failures are logged and contained: a failing cue, a failing
query or one actor's failing damage delivery never stops the rest of the
blast. Every actor is handled independently, so result ordering is
irrelevant. ``apply`` is not idempotent; each call is a separate blast.
"""

import logging
from typing import List, Sequence

from dangerous_collectibles.components import Position
from dangerous_collectibles.registry import Explosion
from dangerous_collectibles.types import (
    Actor,
    DamageSink,
    DamageType,
    EffectPlayer,
    ExemptionProvider,
    SpatialQuery,
)


logger = logging.getLogger(__name__)

FX_BRADLEY_EXPLOSION = "assets/prefabs/npc/m2bradley/effects/bradley_explosion.prefab"
FX_MLRS_ROCKET_EXPLOSION_GROUND = (
    "assets/content/vehicles/mlrs/effects/pfx_mlrs_rocket_explosion_ground.prefab"
)
EXPLOSION_EFFECTS = (FX_BRADLEY_EXPLOSION, FX_MLRS_ROCKET_EXPLOSION_GROUND)


class AreaEffectApplicator:
    """Deals explosion damage to every non-exempt actor in range."""

    def __init__(
        self,
        spatial_query: SpatialQuery,
        damage_sink: DamageSink,
        effect_player: EffectPlayer,
        exemption: ExemptionProvider,
        effects: Sequence[str] = EXPLOSION_EFFECTS,
    ) -> None:
        self.spatial_query = spatial_query
        self.damage_sink = damage_sink
        self.effect_player = effect_player
        self.exemption = exemption
        self.effects = tuple(effects)

    def apply(self, position: Position, explosion: Explosion) -> List[Actor]:
        """Detonate at ``position``.

        Arguments:
            position:
                Blast center.
            explosion:
                Profile providing radius and damage.

        Returns:
            List[Actor]
                Actors that were successfully damaged.
        """
        self._play_effects(position)

        try:
            nearby: List[Actor] = list(
                self.spatial_query.actors_in_radius(position, explosion.impact_radius)
            )
        except Exception:
            logger.exception("Spatial query failed at %s", position)
            return []

        damaged: List[Actor] = []
        for actor in nearby:
            if actor is None:
                continue
            try:
                if self.exemption.is_exempt(actor):
                    continue
                self.damage_sink.apply_damage(
                    actor, explosion.damage_amount, DamageType.EXPLOSION
                )
            except Exception:
                logger.exception("Failed to apply explosion damage to %r", actor)
                continue
            damaged.append(actor)

        logger.debug(
            "Explosion at %s (radius %s) hit %d of %d actors",
            position,
            explosion.impact_radius,
            len(damaged),
            len(nearby),
        )
        return damaged

    def _play_effects(self, position: Position) -> None:
        for effect in self.effects:
            try:
                self.effect_player.play(effect, position)
            except Exception:
                logger.exception("Effect %s failed at %s", effect, position)
