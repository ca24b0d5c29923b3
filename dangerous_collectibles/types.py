"""Common type aliases, enumerations and collaborator protocols.

The trigger pipeline talks to the host only through the small protocols
defined here (random source, exemption, spatial query, damage sink, effect
playback). Concrete implementations live in :mod:`dangerous_collectibles.world`
and :mod:`dangerous_collectibles.permissions`; tests supply their own doubles.
"""

from enum import StrEnum, auto
from typing import Hashable, Iterable, Protocol, TYPE_CHECKING


if TYPE_CHECKING:
    from dangerous_collectibles.components import Position

EntityID = int

Actor = Hashable


class Disposition(StrEnum):
    """Outcome of a pickup evaluation reported back to the host."""

    CONSUME = auto()
    IGNORE = auto()


class DamageType(StrEnum):
    """Damage categories understood by damage sinks."""

    EXPLOSION = auto()


class RandomSource(Protocol):
    """Uniform integer source; ``random.Random`` satisfies it."""

    def randrange(self, start: int, stop: int) -> int: ...


class ExemptionProvider(Protocol):
    def is_exempt(self, actor: Actor) -> bool: ...


class SpatialQuery(Protocol):
    """Actors on the damageable layer within ``radius`` of ``position``.

    No ordering is guaranteed.
    """

    def actors_in_radius(
        self, position: "Position", radius: float
    ) -> Iterable[Actor]: ...


class DamageSink(Protocol):
    def apply_damage(
        self, actor: Actor, amount: float, damage_type: DamageType
    ) -> None: ...


class EffectPlayer(Protocol):
    """Fire-and-forget visual/audio cue at a world position."""

    def play(self, effect: str, position: "Position") -> None: ...
